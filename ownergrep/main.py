# ownergrep/main.py
"""
ownergrep Entry Point

Searches the files a CODEOWNERS owner is responsible for:

    ownergrep <searchTerm> <team>

CODEOWNERS is read from .github/CODEOWNERS and ignore patterns from
.gitignore, both relative to the current directory.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ownergrep import __version__
from ownergrep.config.settings import get_settings
from ownergrep.core.constants import APP_NAME
from ownergrep.core.exceptions import IgnoreFileError
from ownergrep.core.orchestrator import OwnerSearch
from ownergrep.ui.cli.report import ReportRenderer
from ownergrep.utils.logger import get_logger, log_exception, setup_logger

logger = get_logger(__name__)

# Initialize Rich console
console = Console(highlight=False)

# CLI App
app = typer.Typer(
    name=APP_NAME,
    help="Search the files owned by a CODEOWNERS team for a term",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{APP_NAME} {__version__}")
        raise typer.Exit(0)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    search_term: Optional[str] = typer.Argument(None, metavar="SEARCH_TERM", help="Text to search for (case-insensitive)"),
    team: Optional[str] = typer.Argument(None, metavar="TEAM", help="Owner as written in CODEOWNERS, e.g. @org/team"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """
    Search files under the CODEOWNERS paths of TEAM for SEARCH_TERM.
    """
    renderer = ReportRenderer(console)

    # Checked before anything touches the filesystem
    if search_term is None or team is None:
        renderer.usage()
        raise typer.Exit(1)

    settings = get_settings()
    log_file = settings.logging.file.path if settings.logging.file.enabled else None
    setup_logger(
        level="DEBUG" if verbose else settings.logging.level,
        log_file=log_file,
        rotation=settings.logging.file.rotation,
        retention=settings.logging.file.retention,
    )

    renderer.start(search_term, team)

    search = OwnerSearch(settings=settings, root=Path.cwd(), on_search=renderer.searching)
    try:
        report = search.run(search_term, team)
    except IgnoreFileError as e:
        if verbose:
            log_exception(e, e.context)
        else:
            logger.error(e.message)
        raise typer.Exit(1)

    renderer.report(report)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
