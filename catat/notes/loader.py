"""Directory scanning and the date-ordered note index."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import NoteNotFoundError
from ..models import NoteRecord
from .metadata import aggregate
from .parser import DEFAULT_PATTERNS, TokenPatterns, scan_text
from .record import build_record

logger = logging.getLogger(__name__)


def read_note_text(path: Path) -> str:
    """Read a note as UTF-8 without translating line endings.

    Undecodable bytes are replaced rather than rejected.
    """
    return path.read_bytes().decode("utf-8", errors="replace")


def load_note(path: Path, patterns: TokenPatterns = DEFAULT_PATTERNS) -> NoteRecord:
    """Scan a single note file into a record."""
    metadata = aggregate(scan_text(read_note_text(path), patterns))
    note = build_record(metadata, path.name)
    logger.debug(
        "Scanned %s: date=%s parents=%d hashtags=%d links=%d",
        note.name,
        note.date,
        len(note.parents),
        len(note.hashtags),
        note.links,
    )
    return note


def load_notes(directory: Path, patterns: TokenPatterns = DEFAULT_PATTERNS) -> list[NoteRecord]:
    """Load every regular file directly inside ``directory``.

    Subdirectories are skipped. Files are visited in name order.
    """
    notes = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if not path.is_file():
            continue
        notes.append(load_note(path, patterns))
    return notes


def sort_by_date(notes: Iterable[NoteRecord]) -> list[NoteRecord]:
    """Stable ascending sort on date; equal dates keep their order."""
    return sorted(notes, key=lambda note: note.date)


def filter_by_name(notes: Iterable[NoteRecord], pattern: re.Pattern[str] | str) -> list[NoteRecord]:
    """Keep notes whose file name contains a match for ``pattern``."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return [note for note in notes if pattern.search(note.name)]


@dataclass
class NoteIndex:
    """Date-ordered records for one directory."""

    path: Path
    notes: list[NoteRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.notes)

    def matching(self, pattern: re.Pattern[str] | str) -> list[NoteRecord]:
        """Notes whose names match ``pattern``, in date order."""
        return filter_by_name(self.notes, pattern)

    def resolve(self, ordinal: int, pattern: re.Pattern[str] | str) -> NoteRecord:
        """Select a note by its 1-based position among the matching notes.

        Raises:
            NoteNotFoundError: ordinal is below 1 or past the last match
        """
        matches = self.matching(pattern)
        if ordinal < 1 or ordinal > len(matches):
            raise NoteNotFoundError(ordinal, len(matches))
        return matches[ordinal - 1]

    def read_content(self, note: NoteRecord) -> str:
        """Re-read the raw text of an indexed note."""
        return read_note_text(self.path / note.name)


def load_index(directory: Path, patterns: TokenPatterns = DEFAULT_PATTERNS) -> NoteIndex:
    """Scan ``directory`` and return its notes sorted by date.

    Args:
        directory: Directory holding the note files
        patterns: Compiled token expressions for the scanner

    Returns:
        NoteIndex with one record per regular file

    Raises:
        OSError: the directory or one of its files cannot be read
    """
    index = NoteIndex(path=directory, notes=sort_by_date(load_notes(directory, patterns)))
    logger.info("Indexed %d notes from %s", len(index), directory)
    return index
