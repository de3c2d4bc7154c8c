# ownergrep/core/__init__.py
"""Core module for ownergrep."""

from ownergrep.core.constants import (
    DEFAULT_CODEOWNERS_PATH,
    DEFAULT_IGNORE_FILE,
    OWNER_SIGIL,
    COMMENT_MARKER,
)
from ownergrep.core.exceptions import (
    OwnerGrepException,
    InputFileException,
    SearchException,
)

__all__ = [
    "DEFAULT_CODEOWNERS_PATH",
    "DEFAULT_IGNORE_FILE",
    "OWNER_SIGIL",
    "COMMENT_MARKER",
    "OwnerGrepException",
    "InputFileException",
    "SearchException",
]
