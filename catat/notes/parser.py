"""Line scanning for key::value pairs, hashtags, and [[links]]."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Every \r and every \n ends a line, so \r\n leaves an empty line between them
LINE_BREAK_PATTERN = re.compile(r"[\r\n]")

KEY_VALUE_DELIMITER = "::"


@dataclass(frozen=True)
class KeyValue:
    key: str
    value: str


@dataclass(frozen=True)
class Hashtag:
    text: str


@dataclass(frozen=True)
class Link:
    """One [[...]] occurrence."""


Token = KeyValue | Hashtag | Link


@dataclass(frozen=True)
class TokenPatterns:
    """Compiled expressions used by the scanner."""

    # Matches at the start of a whitespace-delimited word: #tag, #tag/sub, #tag_1
    hashtag: re.Pattern[str]
    # Minimal [[...]] pair, so "[[a]] and [[b]]" counts twice
    link: re.Pattern[str]

    @classmethod
    def compile(cls) -> TokenPatterns:
        return cls(
            hashtag=re.compile(r"^#[a-zA-Z0-9/_]+"),
            link=re.compile(r"\[\[.*?\]\]"),
        )


DEFAULT_PATTERNS = TokenPatterns.compile()


def split_lines(text: str) -> list[str]:
    """Split note text on every carriage return or line feed.

    Empty lines are kept. A terminator at the very end does not produce a
    trailing empty line.
    """
    lines = LINE_BREAK_PATTERN.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def scan_line(line: str, patterns: TokenPatterns = DEFAULT_PATTERNS) -> Iterator[Token]:
    """Yield the tokens found in one line.

    Key-value pairs come first, then hashtags, then links. A line may yield
    tokens of all three kinds.
    """
    if KEY_VALUE_DELIMITER in line:
        key, value = line.split(KEY_VALUE_DELIMITER, 1)
        yield KeyValue(key, value)

    for word in line.split():
        if patterns.hashtag.match(word):
            yield Hashtag(word.strip())

    for _ in patterns.link.finditer(line):
        yield Link()


def scan_lines(lines: Iterable[str], patterns: TokenPatterns = DEFAULT_PATTERNS) -> Iterator[Token]:
    """Scan lines independently and in order."""
    for line in lines:
        yield from scan_line(line, patterns)


def scan_text(text: str, patterns: TokenPatterns = DEFAULT_PATTERNS) -> Iterator[Token]:
    """Scan the full text of one note."""
    return scan_lines(split_lines(text), patterns)
