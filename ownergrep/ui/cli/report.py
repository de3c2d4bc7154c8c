# ownergrep/ui/cli/report.py
"""
CLI Report Rendering

Progress lines and the final report, written to stdout.
"""

from typing import Optional

from rich.console import Console

from ownergrep.core.codeowners import OwnershipEntry
from ownergrep.core.constants import USAGE_EXAMPLE, USAGE_TEXT
from ownergrep.core.orchestrator import SearchReport


class ReportRenderer:
    """Prints search progress and results as plain text lines."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def line(self, text: str = "") -> None:
        # Paths may contain [brackets]; never treat them as markup or wrap them
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def usage(self) -> None:
        self.line(USAGE_TEXT)
        self.line(USAGE_EXAMPLE)

    def start(self, term: str, owner: str) -> None:
        self.line(f'Searching for files containing "{term}" in paths owned by "{owner}"...')

    def searching(self, entry: OwnershipEntry) -> None:
        self.line(f"Searching in path: {entry.path_pattern}")

    def report(self, report: SearchReport) -> None:
        matches = report.matches
        if not matches:
            self.line()
            self.line("No files found matching the criteria.")
            return

        self.line()
        self.line(f"{len(matches)} Files found:")
        for path in matches:
            self.line(f"- {path}")
        self.line()
        self.line(f"Files path separated by comma: {', '.join(matches)}")
