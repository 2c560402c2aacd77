"""Note scanning, metadata extraction, and indexing."""

from .loader import NoteIndex, load_index, load_note, load_notes
from .metadata import aggregate
from .parser import DEFAULT_PATTERNS, TokenPatterns, scan_text, split_lines
from .record import build_record, parse_count, parse_date, parse_list

__all__ = [
    "DEFAULT_PATTERNS",
    "NoteIndex",
    "TokenPatterns",
    "aggregate",
    "build_record",
    "load_index",
    "load_note",
    "load_notes",
    "parse_count",
    "parse_date",
    "parse_list",
    "scan_text",
    "split_lines",
]
