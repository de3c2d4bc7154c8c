# ownergrep/ui/cli/__init__.py
"""Terminal output for ownergrep."""

from ownergrep.ui.cli.report import ReportRenderer

__all__ = ["ReportRenderer"]
