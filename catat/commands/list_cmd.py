"""List command - show notes ordered by date."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..models import DEFAULT_LIMIT, DEFAULT_PATTERN, NoteRecord, format_note
from ..notes.loader import load_index

logger = logging.getLogger(__name__)


def run_list(
    directory: Path,
    to: Path | None = None,
    *,
    limit: int = DEFAULT_LIMIT,
    pattern: re.Pattern[str] | str = DEFAULT_PATTERN,
    output_json: bool = False,
) -> int:
    """List the notes in ``directory`` whose names match ``pattern``.

    Args:
        directory: Directory holding the note files
        to: Write every matching note here (no limit) instead of printing
        limit: Maximum number of notes printed to the console
        pattern: Regular expression searched for in each file name
        output_json: Print the listed notes as JSON

    Returns:
        Exit code (0 = success)
    """
    console = Console(stderr=True)

    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    index = load_index(directory)
    console.print(f"Read {len(index)} files", style="dim")

    notes = index.matching(pattern)
    logger.debug("%d of %d notes match %r", len(notes), len(index), pattern.pattern)

    if to is not None:
        to.write_text("".join(f"{format_note(note)}\n" for note in notes), encoding="utf-8")
        console.print(f"Wrote {len(notes)} notes to {to}", style="green")
        return 0

    shown = notes[: max(0, limit)]
    if output_json:
        _output_json(shown)
        return 0

    _print_listing(shown)
    print("---")
    print(
        f"Use `catat read {directory} -n <N> --with \"{pattern.pattern}\"` to read content number <N>"
    )
    return 0


def _print_listing(notes: list[NoteRecord]) -> None:
    out = Console(highlight=False, emoji=False, soft_wrap=True)
    for ordinal, note in enumerate(notes, start=1):
        label = escape(f"[{ordinal:>2}]")
        out.print(f"{label} {format_note(note, markup=True)}")


def _output_json(notes: list[NoteRecord]) -> None:
    payload = [{"ordinal": ordinal, **note.to_dict()} for ordinal, note in enumerate(notes, start=1)]
    print(json.dumps(payload, indent=2, ensure_ascii=False))
