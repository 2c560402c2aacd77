"""Conversion of a metadata map into a NoteRecord.

Each field has its own parser. Parsers never raise on malformed input; they
fall back to the field's neutral value so that every file yields a record.
"""

from __future__ import annotations

import datetime
import re

from ..models import DATE_KEY, EMPTY_DATE, HASHTAG_KEY, LINKS_KEY, PARENTS_KEY, SEPARATOR, NoteRecord
from .metadata import MetadataMap

DATE_PATTERN = re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})")
DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str | None) -> datetime.date:
    """Parse a ``tarikh`` value.

    A date-shaped substring must be present, but the whole value is what gets
    parsed, so "2024-03-05 :: 2024-04-01" (two tarikh lines) falls back to
    EMPTY_DATE.
    """
    if value is None:
        return EMPTY_DATE
    value = value.strip()
    if not DATE_PATTERN.search(value):
        return EMPTY_DATE
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return EMPTY_DATE


def parse_list(value: str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(part.strip() for part in value.split(SEPARATOR))


def parse_count(value: str | None) -> int:
    if value is None:
        return 0
    return len(value.strip())


def build_record(metadata: MetadataMap, name: str) -> NoteRecord:
    """Build the record for one note from its metadata map and file name."""
    return NoteRecord(
        name=name,
        date=parse_date(metadata.get(DATE_KEY)),
        parents=parse_list(metadata.get(PARENTS_KEY)),
        hashtags=parse_list(metadata.get(HASHTAG_KEY)),
        links=parse_count(metadata.get(LINKS_KEY)),
    )
