# ownergrep/core/codeowners.py
"""
CODEOWNERS parsing.

Turns an ownership file into an ordered list of entries and selects the
entries a given owner is listed on.
"""

from dataclasses import dataclass
from pathlib import Path

from ownergrep.core.constants import COMMENT_MARKER, FILE_ENCODING, OWNER_SIGIL
from ownergrep.core.exceptions import CodeownersNotFoundError
from ownergrep.utils.logger import logger


@dataclass(frozen=True)
class OwnershipEntry:
    """One CODEOWNERS line: a path pattern and the owners listed for it."""

    path_pattern: str
    owners: tuple[str, ...]

    def is_owned_by(self, owner: str) -> bool:
        """Case-insensitive exact membership test."""
        wanted = owner.lower()
        return any(o.lower() == wanted for o in self.owners)


def parse_codeowners_text(
    content: str,
    sigil: str = OWNER_SIGIL,
    comment_marker: str = COMMENT_MARKER,
) -> list[OwnershipEntry]:
    """Parse CODEOWNERS content into entries, preserving file order."""
    entries: list[OwnershipEntry] = []

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith(comment_marker):
            continue

        # <pattern> <owner1> [<owner2> ...]
        tokens = line.split()
        if len(tokens) < 2:
            continue

        owners = tuple(t for t in tokens[1:] if t.startswith(sigil))
        entries.append(OwnershipEntry(path_pattern=tokens[0], owners=owners))

    return entries


def _read_codeowners(path: Path) -> str:
    if not path.is_file():
        raise CodeownersNotFoundError(path)
    try:
        return path.read_text(encoding=FILE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise CodeownersNotFoundError(path, reason=str(e)) from e


def parse_codeowners(
    path: Path | str,
    sigil: str = OWNER_SIGIL,
    comment_marker: str = COMMENT_MARKER,
) -> list[OwnershipEntry]:
    """
    Parse a CODEOWNERS file.

    A missing or unreadable file is not fatal: the error is logged and an
    empty list is returned.

    Args:
        path: Location of the CODEOWNERS file
        sigil: Prefix that marks a token as an owner
        comment_marker: Prefix of comment lines

    Returns:
        Entries in file order
    """
    path = Path(path)
    try:
        content = _read_codeowners(path)
    except CodeownersNotFoundError as e:
        logger.error(f"Error: {e.message}")
        return []

    entries = parse_codeowners_text(content, sigil=sigil, comment_marker=comment_marker)
    logger.info(f"Parsed {len(entries)} CODEOWNERS entries from {path}")
    return entries


def entries_for_owner(entries: list[OwnershipEntry], owner: str) -> list[OwnershipEntry]:
    """Return the entries listing ``owner``, in file order."""
    return [entry for entry in entries if entry.is_owned_by(owner)]


def normalize_path_pattern(pattern: str) -> str:
    """
    Turn a CODEOWNERS path pattern into a searchable relative path.

    Wildcards are dropped and one leading slash is removed, so ``/docs/*``
    becomes ``docs/`` and ``/`` becomes the run root.
    """
    normalized = pattern.replace("*", "")
    if normalized.startswith("/"):
        normalized = normalized[1:]
    return normalized
