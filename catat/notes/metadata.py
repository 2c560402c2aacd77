"""Fold scanned tokens into a metadata map."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import HASHTAG_KEY, LINK_MARKER, LINKS_KEY, SEPARATOR
from .parser import Hashtag, KeyValue, Link, Token

MetadataMap = dict[str, str]


def accumulate(metadata: MetadataMap, key: str, value: str) -> None:
    """Append ``value`` to the entry for ``key``, joining with the separator."""
    existing = metadata.get(key)
    if existing is None:
        metadata[key] = value
    else:
        metadata[key] = f"{existing}{SEPARATOR}{value}"


def aggregate(tokens: Iterable[Token]) -> MetadataMap:
    """Build the metadata map for one note.

    Values keep the order in which their tokens were scanned. A key-value
    token contributes one occurrence per comma-separated sub-value, hashtags
    accumulate under ``hashtag``, and each link appends one marker under
    ``links``.
    """
    metadata: MetadataMap = {}
    for token in tokens:
        if isinstance(token, KeyValue):
            for part in token.value.split(","):
                accumulate(metadata, token.key, part.strip())
        elif isinstance(token, Hashtag):
            accumulate(metadata, HASHTAG_KEY, token.text)
        elif isinstance(token, Link):
            metadata[LINKS_KEY] = metadata.get(LINKS_KEY, "") + LINK_MARKER
    return metadata
