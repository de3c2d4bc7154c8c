# ownergrep/core/orchestrator.py
"""
Search orchestration.

Ties the pipeline together: parse CODEOWNERS once, pick the entries owned
by the requested owner, search each of them and merge the matches.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from ownergrep.config.settings import Settings, get_settings
from ownergrep.core.codeowners import (
    OwnershipEntry,
    entries_for_owner,
    normalize_path_pattern,
    parse_codeowners,
)
from ownergrep.core.ignore import IgnoreMatcher, load_ignore_patterns
from ownergrep.core.searcher import search_path
from ownergrep.utils.logger import log_performance, logger


@dataclass
class SearchReport:
    """Outcome of one search run."""

    term: str
    owner: str
    entries_parsed: int = 0
    searched_paths: list[str] = field(default_factory=list)
    # dict keys keep the matches unique
    _matches: dict[str, None] = field(default_factory=dict, init=False, repr=False)

    def add(self, paths: list[str]) -> None:
        for path in paths:
            self._matches[path] = None

    @property
    def matches(self) -> list[str]:
        return list(self._matches)

    @property
    def count(self) -> int:
        return len(self._matches)


class OwnerSearch:
    """
    Runs a content search over the paths an owner is listed on.

    The ignore file is only read when a directory has to be walked, and at
    most once per instance.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        root: Optional[Path | str] = None,
        on_search: Optional[Callable[[OwnershipEntry], None]] = None,
    ):
        self.settings = settings or get_settings()
        self.root = Path(root) if root is not None else Path.cwd()
        self.on_search = on_search
        self._matcher: Optional[IgnoreMatcher] = None

    @property
    def codeowners_file(self) -> Path:
        return self.root / self.settings.codeowners_path

    @property
    def ignore_file(self) -> Path:
        return self.root / self.settings.ignore_file

    def matcher(self) -> IgnoreMatcher:
        """Load the ignore rules on first use."""
        if self._matcher is None:
            patterns = load_ignore_patterns(self.ignore_file, comment_marker=self.settings.comment_marker)
            self._matcher = IgnoreMatcher(patterns, self.root)
        return self._matcher

    def run(self, term: str, owner: str) -> SearchReport:
        """
        Search every path owned by ``owner`` for ``term``.

        Raises:
            IgnoreFileError: If a directory must be walked and the ignore
                file cannot be read
        """
        start = time.perf_counter()
        entries = parse_codeowners(
            self.codeowners_file,
            sigil=self.settings.owner_sigil,
            comment_marker=self.settings.comment_marker,
        )
        report = SearchReport(term=term, owner=owner, entries_parsed=len(entries))

        for entry in entries_for_owner(entries, owner):
            if self.on_search:
                self.on_search(entry)
            logger.debug(f"Searching {entry.path_pattern} (owners: {', '.join(entry.owners)})")
            report.searched_paths.append(entry.path_pattern)
            report.add(
                search_path(
                    normalize_path_pattern(entry.path_pattern),
                    term,
                    self.root,
                    self.matcher,
                )
            )

        logger.info(f'Found {report.count} files containing "{term}" in paths owned by "{owner}".')
        log_performance(
            "owner_search",
            (time.perf_counter() - start) * 1000,
            {"entries": report.entries_parsed, "searched": len(report.searched_paths)},
        )
        return report


def find_owned_files(
    term: str,
    owner: str,
    settings: Optional[Settings] = None,
    root: Optional[Path | str] = None,
) -> list[str]:
    """Return the files owned by ``owner`` that contain ``term``."""
    return OwnerSearch(settings=settings, root=root).run(term, owner).matches
