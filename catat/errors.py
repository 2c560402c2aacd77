"""Exceptions raised by catat operations."""


class CatatError(Exception):
    """Base class for reported, non-I/O failures."""


class NoteNotFoundError(CatatError):
    """An ordinal does not select any note in the filtered sequence."""

    def __init__(self, ordinal: int, available: int):
        self.ordinal = ordinal
        self.available = available
        super().__init__(f"No note #{ordinal} ({available} matching notes)")
