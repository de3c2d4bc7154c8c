# ownergrep/core/searcher.py
"""
Case-insensitive content search over a file or a directory tree.

Failures are contained per path and per file: they are logged and the
search carries on. Only a broken ignore file stops a search.
"""

from pathlib import Path
from typing import Callable

from ownergrep.core.constants import FILE_ENCODING
from ownergrep.core.exceptions import FileReadError, SearchPathError
from ownergrep.core.ignore import IgnoreMatcher
from ownergrep.core.walker import walk_files
from ownergrep.utils.logger import logger


def file_contains(path: Path | str, term: str) -> bool:
    """
    Test whether a file contains ``term``, ignoring case.

    Raises:
        FileReadError: If the file cannot be read
    """
    path = Path(path)
    try:
        content = path.read_text(encoding=FILE_ENCODING, errors="replace")
    except OSError as e:
        raise FileReadError(path, reason=e.strerror or str(e)) from e
    return term.lower() in content.lower()


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _scan(files: list[Path], term: str, root: Path) -> list[str]:
    matches: list[str] = []
    for file in files:
        try:
            if file_contains(file, term):
                matches.append(_relative(file, root))
        except FileReadError as e:
            logger.warning(e.message)
    return matches


def search_path(
    base_path: str,
    term: str,
    root: Path | str,
    matcher_factory: Callable[[], IgnoreMatcher],
) -> list[str]:
    """
    Search a file, or every candidate file below a directory, for ``term``.

    Args:
        base_path: Path to search, relative to ``root``
        term: Text to look for, matched case-insensitively
        root: Run directory; results are relative to it
        matcher_factory: Returns the ignore rules; only called for directories

    Returns:
        Matching files as relative POSIX paths
    """
    root = Path(root)
    full_path = root / base_path.lstrip("/")

    try:
        if not full_path.exists():
            raise SearchPathError(full_path)

        if full_path.is_file():
            return _scan([full_path], term, root)

        if full_path.is_dir():
            matcher = matcher_factory()
            return _scan(walk_files(full_path, matcher), term, root)

        return []
    except SearchPathError as e:
        logger.warning(e.message)
    except OSError as e:
        logger.error(SearchPathError(base_path, reason=e.strerror or str(e)).message)
    return []
