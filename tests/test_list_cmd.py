import json
from pathlib import Path

from catat.commands.list_cmd import run_list


def test_list_prints_notes_in_date_order(notes_dir: Path, capsys) -> None:
    exit_code = run_list(notes_dir)

    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert exit_code == 0
    assert "Read 4 files" in captured.err
    assert lines[:8] == [
        "[ 1] 1970-01-01 -[🔗  0]- scratch.txt",
        "<:::>",
        "[ 2] 2024-01-15 -[🔗  0]- alpha.md",
        "<:#inbox::gamma>",
        "[ 3] 2024-03-05 -[🔗  1]- beta.md",
        "<:::>",
        "[ 4] 2024-05-01 -[🔗  0]- gamma.md",
        "<:::>",
    ]
    assert lines[8] == "---"
    assert lines[9] == f'Use `catat read {notes_dir} -n <N> --with "."` to read content number <N>'


def test_list_respects_limit(notes_dir: Path, capsys) -> None:
    run_list(notes_dir, limit=2)

    out = capsys.readouterr().out
    assert "scratch.txt" in out
    assert "alpha.md" in out
    assert "beta.md" not in out
    assert "[ 3]" not in out


def test_list_filters_by_pattern(notes_dir: Path, capsys) -> None:
    run_list(notes_dir, pattern=r"^(beta|gamma)")

    out = capsys.readouterr().out
    assert "[ 1] 2024-03-05 -[🔗  1]- beta.md" in out
    assert "[ 2] 2024-05-01 -[🔗  0]- gamma.md" in out
    assert "alpha.md" not in out
    assert '--with "^(beta|gamma)"' in out


def test_list_with_no_matches_is_not_an_error(notes_dir: Path, capsys) -> None:
    exit_code = run_list(notes_dir, pattern="^nothing")

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0] == "---"


def test_list_to_file_writes_all_matches_without_limit(notes_dir: Path, tmp_path: Path, capsys) -> None:
    out_file = tmp_path / "listing.txt"
    out_file.write_text("stale\n", encoding="utf-8")

    exit_code = run_list(notes_dir, out_file, limit=1, pattern=r"\.md$")

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == ""
    assert "Wrote 3 notes" in captured.err
    assert out_file.read_text(encoding="utf-8") == (
        "2024-01-15 -[🔗  0]- alpha.md\n<:#inbox::gamma>\n"
        "2024-03-05 -[🔗  1]- beta.md\n<:::>\n"
        "2024-05-01 -[🔗  0]- gamma.md\n<:::>\n"
    )


def test_list_json(notes_dir: Path, capsys) -> None:
    run_list(notes_dir, limit=2, output_json=True)

    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {"ordinal": 1, "name": "scratch.txt", "date": "1970-01-01", "parents": [], "hashtags": [], "links": 0},
        {
            "ordinal": 2,
            "name": "alpha.md",
            "date": "2024-01-15",
            "parents": ["gamma"],
            "hashtags": ["#inbox"],
            "links": 0,
        },
    ]


def test_list_does_not_modify_notes(notes_dir: Path, capsys) -> None:
    before = {p.name: p.read_bytes() for p in notes_dir.iterdir()}

    run_list(notes_dir)

    assert {p.name: p.read_bytes() for p in notes_dir.iterdir()} == before
