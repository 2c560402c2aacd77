"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from catat.notes.loader import NoteIndex, load_index


@pytest.fixture(autouse=True)
def plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from emitting color codes into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def _write_note(directory: Path, name: str, lines: list[str]) -> Path:
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Three dated notes written out of date order, plus an undated one."""
    directory = tmp_path / "notes"
    directory.mkdir()

    _write_note(directory, "gamma.md", ["tarikh::2024-05-01", "Third by date."])
    _write_note(directory, "alpha.md", ["tarikh::2024-01-15", "idx-naik::gamma", "#inbox first"])
    _write_note(directory, "beta.md", ["tarikh::2024-03-05", "See [[alpha]]."])
    _write_note(directory, "scratch.txt", ["no metadata here"])
    return directory


@pytest.fixture
def notes_index(notes_dir: Path) -> NoteIndex:
    return load_index(notes_dir)
