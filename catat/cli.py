"""CLI entrypoint for catat."""

import re
import sys
from pathlib import Path

import click

from . import __version__
from .models import DEFAULT_LIMIT, DEFAULT_PATTERN


def _compile_pattern(ctx: click.Context, param: click.Parameter, value: str) -> re.Pattern[str]:
    """Compile the --with expression, rejecting invalid ones before any scan."""
    try:
        return re.compile(value)
    except re.error as e:
        raise click.BadParameter(f"invalid regular expression {value!r}: {e}") from e


def _notes_dir_argument(func):
    return click.argument(
        "from_dir",
        metavar="FROM_DIR",
        type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    )(func)


def _pattern_option(func):
    return click.option(
        "--with",
        "pattern",
        type=str,
        default=DEFAULT_PATTERN,
        show_default=True,
        callback=_compile_pattern,
        metavar="REGEX",
        help="Only include notes whose file name matches this expression",
    )(func)


@click.group()
@click.version_option(__version__, prog_name="catat")
@click.option("--verbose", "-V", is_flag=True, default=False, help="Log per-file scan details to stderr")
def cli(verbose: bool) -> None:
    """catat - date-ordered index over a directory of plain-text notes.

    Notes carry their metadata inline: `tarikh::YYYY-MM-DD` for the date,
    `idx-naik::a, b` for parent notes, `#tags` anywhere, and `[[links]]`.
    """
    from .logging_config import configure_logging

    configure_logging(verbose)


@cli.command("list")
@_notes_dir_argument
@click.argument(
    "to_file",
    metavar="[TO_FILE]",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Max notes to print (ignored when writing to TO_FILE)",
)
@_pattern_option
@click.option("--json", "output_json", is_flag=True, default=False, help="Output the listed notes as JSON")
def list_notes(
    from_dir: Path,
    to_file: Path | None,
    limit: int,
    pattern: re.Pattern[str],
    output_json: bool,
) -> None:
    """List notes in FROM_DIR, oldest first.

    With TO_FILE, every matching note is written there instead of printed.

    Examples:

        catat list ~/notes

        catat list ~/notes --with "^2024" --limit 20

        catat list ~/notes all-notes.txt
    """
    from .commands.list_cmd import run_list

    try:
        exit_code = run_list(from_dir, to_file, limit=limit, pattern=pattern, output_json=output_json)
    except OSError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


@cli.command("read")
@_notes_dir_argument
@click.option("-n", "number", type=int, required=True, metavar="N", help="Position of the note in the listing (1-based)")
@_pattern_option
def read_note(from_dir: Path, number: int, pattern: re.Pattern[str]) -> None:
    """Print note number N from FROM_DIR followed by its content.

    N counts from 1 in the order `catat list` shows for the same --with.

    Examples:

        catat read ~/notes -n 3

        catat read ~/notes -n 1 --with "draft"
    """
    from .commands.read_cmd import run_read

    try:
        exit_code = run_read(from_dir, number, pattern=pattern)
    except OSError as e:
        raise click.ClickException(str(e)) from e
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
