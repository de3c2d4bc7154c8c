# ownergrep/core/constants.py
"""
Constants for ownergrep

Defines the constant values used throughout the application.
"""

from typing import Final

# ============================================
# Version Information
# ============================================
APP_NAME: Final[str] = "ownergrep"


# ============================================
# Input Files
# ============================================
# Both paths are relative to the directory the search runs in.
DEFAULT_CODEOWNERS_PATH: Final[str] = ".github/CODEOWNERS"
DEFAULT_IGNORE_FILE: Final[str] = ".gitignore"


# ============================================
# File Format
# ============================================
OWNER_SIGIL: Final[str] = "@"
COMMENT_MARKER: Final[str] = "#"
FILE_ENCODING: Final[str] = "utf-8"


# ============================================
# CLI
# ============================================
USAGE_TEXT: Final[str] = f"Usage: {APP_NAME} <searchTerm> <team>"
USAGE_EXAMPLE: Final[str] = f'Example: {APP_NAME} "TODO" "@elastic/kibana-apm"'
