# ownergrep/core/walker.py
"""
Filesystem walk with ignore pruning.
"""

from pathlib import Path
from typing import Iterator

from ownergrep.core.ignore import IgnoreMatcher
from ownergrep.utils.logger import logger


def walk_files(start: Path | str, matcher: IgnoreMatcher) -> list[Path]:
    """
    Collect every non-ignored file below ``start``.

    Entries are visited depth-first in directory-listing order, the same
    order a recursive walk would produce. An ignored directory is pruned
    without being listed. ``start`` itself is never tested against the
    matcher, and an error listing it is raised to the caller.

    Args:
        start: Directory to walk
        matcher: Ignore rules, relative to the run root

    Returns:
        File paths, in visiting order
    """
    start = Path(start)
    files: list[Path] = []
    stack: list[Iterator[Path]] = [iter(list(start.iterdir()))]

    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        if matcher.is_ignored(child):
            logger.trace(f"Ignored {child}")
            continue

        try:
            if child.is_dir():
                stack.append(iter(list(child.iterdir())))
            elif child.is_file():
                files.append(child)
        except OSError as e:
            # Only this entry is skipped; the rest of the walk carries on
            logger.warning(f"Could not list directory {child}: {e.strerror or e}")

    return files
