# ownergrep/core/ignore.py
"""
Ignore-file loading and path matching.

Patterns use ``*`` (any characters) and ``?`` (one character). A pattern
matches a relative path when it matches the whole path, a directory segment
of it, or its trailing suffix. There is no negation and no anchoring; the
first matching pattern wins.
"""

import re
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from ownergrep.core.constants import COMMENT_MARKER, FILE_ENCODING
from ownergrep.core.exceptions import IgnoreFileError
from ownergrep.utils.logger import logger


def parse_ignore_text(content: str, comment_marker: str = COMMENT_MARKER) -> tuple[str, ...]:
    """Collect the patterns of an ignore file, de-duplicated in file order."""
    patterns: dict[str, None] = {}
    for line in content.splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith(comment_marker):
            continue
        patterns[line] = None
    return tuple(patterns)


def load_ignore_patterns(path: Path | str, comment_marker: str = COMMENT_MARKER) -> tuple[str, ...]:
    """
    Read an ignore file.

    Unlike the CODEOWNERS file, the ignore file is required: any read error
    is raised as IgnoreFileError.

    Args:
        path: Location of the ignore file
        comment_marker: Prefix of comment lines

    Returns:
        Patterns in file order
    """
    path = Path(path)
    try:
        content = path.read_text(encoding=FILE_ENCODING, errors="replace")
    except OSError as e:
        raise IgnoreFileError(path, reason=e.strerror or str(e)) from e

    patterns = parse_ignore_text(content, comment_marker=comment_marker)
    logger.debug(f"Loaded {len(patterns)} ignore patterns from {path}")
    return patterns


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile an ignore pattern into a regex over relative POSIX paths.

    Everything except the wildcards is matched literally. A trailing slash
    is dropped, so ``build/`` behaves like ``build``.
    """
    body = re.escape(pattern.rstrip("/") or pattern)
    body = body.replace(r"\*", ".*").replace(r"\?", ".")
    return re.compile(rf"^(?:{body})$|(?:^|/)(?:{body})/|/(?:{body})$")


class IgnoreMatcher:
    """
    Decides whether a path is excluded by a set of ignore patterns.

    Paths are tested relative to ``root``.
    """

    def __init__(self, patterns: Iterable[str], root: Path | str):
        self.patterns = tuple(patterns)
        self.root = Path(root)
        self._compiled = [(p, compile_pattern(p)) for p in self.patterns]

    def relative(self, path: Path | str) -> str:
        """Return ``path`` relative to the matcher root, in POSIX form."""
        path = Path(path)
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def match(self, path: Path | str) -> str | None:
        """Return the first pattern matching ``path``, or None."""
        rel = self.relative(path)
        for pattern, regex in self._compiled:
            if regex.search(rel):
                return pattern
        return None

    def is_ignored(self, path: Path | str) -> bool:
        return self.match(path) is not None

    def __len__(self) -> int:
        return len(self.patterns)
