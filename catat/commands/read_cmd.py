"""Read command - print one note selected by its position in the listing."""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console

from ..errors import NoteNotFoundError
from ..models import DEFAULT_PATTERN, format_note
from ..notes.loader import load_index


def run_read(directory: Path, number: int, *, pattern: re.Pattern[str] | str = DEFAULT_PATTERN) -> int:
    """Print note ``number`` (1-based, as shown by ``list``) and its raw text.

    Returns:
        Exit code (0 = success, 1 = no such note)
    """
    console = Console(stderr=True)

    index = load_index(directory)
    try:
        note = index.resolve(number, pattern)
    except NoteNotFoundError as e:
        console.print(str(e), style="bold red")
        return 1

    content = index.read_content(note)

    out = Console(highlight=False, emoji=False, soft_wrap=True)
    out.print(format_note(note, markup=True))
    print(content)
    return 0
