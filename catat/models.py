"""Data models for indexed notes."""

import datetime
from dataclasses import dataclass, field

from rich.markup import escape

# Metadata keys recognized in note text
DATE_KEY = "tarikh"
PARENTS_KEY = "idx-naik"
HASHTAG_KEY = "hashtag"
LINKS_KEY = "links"

# Joins repeated values of one key in the metadata map
SEPARATOR = " :: "
# One marker per detected link; the marker string's length is the count
LINK_MARKER = "x"

# Assigned when a note has no parseable date
EMPTY_DATE = datetime.date(1970, 1, 1)

DEFAULT_LIMIT = 10
DEFAULT_PATTERN = "."


@dataclass(frozen=True)
class NoteRecord:
    """Typed view of the metadata found in one note file."""

    name: str  # file base name, not a path
    date: datetime.date = EMPTY_DATE
    parents: tuple[str, ...] = field(default_factory=tuple)  # from idx-naik
    hashtags: tuple[str, ...] = field(default_factory=tuple)
    links: int = 0  # count of [[...]] occurrences

    @property
    def has_date(self) -> bool:
        return self.date != EMPTY_DATE

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "date": self.date.isoformat(),
            "parents": list(self.parents),
            "hashtags": list(self.hashtags),
            "links": self.links,
        }

    def __str__(self) -> str:
        return format_note(self)


def format_note(note: NoteRecord, *, markup: bool = False) -> str:
    """Render the two-line display form of a note.

    With ``markup`` the result carries rich console markup: the date in yellow,
    hashtags underlined and parents in blue. Without it the text is plain and
    suitable for writing to a file.
    """
    if markup:
        day = f"[yellow]{note.date.isoformat()}[/yellow]"
        name = escape(note.name)
        hashtags = "::".join(f"[underline]{escape(tag)}[/underline]" for tag in note.hashtags)
        parents = "::".join(f"[blue]{escape(parent)}[/blue]" for parent in note.parents)
        links = escape(f"[🔗{note.links:>3}]")
    else:
        day = note.date.isoformat()
        name = note.name
        hashtags = "::".join(note.hashtags)
        parents = "::".join(note.parents)
        links = f"[🔗{note.links:>3}]"

    return f"{day} -{links}- {name}\n<:{hashtags}::{parents}>"
