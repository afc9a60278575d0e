from __future__ import annotations

import json
from pathlib import Path

import typer

from lrc_maker.config import (
    Preferences,
    dump_preferences,
    is_valid_preference,
    load_preferences,
    merge_preferences,
    save_preferences,
)
from lrc_maker.logging_setup import setup_logging
from lrc_maker.lrc.errors import LrcError
from lrc_maker.lrc.export import FormatOptions, export_json, export_lrc
from lrc_maker.lrc.parse import parse_lrc_with_stats
from lrc_maker.lrc.timecode import encode_time


app = typer.Typer(no_args_is_help=True, add_completion=False)

EOL_NAMES = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


@app.callback()
def _root(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    setup_logging(debug)


def _read(path: Path) -> str:
    # utf-8-sig drops a leading BOM; newline="" keeps \r and \r\n for the parser
    with path.open(encoding="utf-8-sig", newline="") as f:
        return f.read()


@app.command()
def parse(
    lrc_path: Path,
    trim_start: bool = typer.Option(False, "--trim-start", help="Strip leading whitespace of lyric text"),
    trim_end: bool = typer.Option(False, "--trim-end", help="Strip trailing whitespace of lyric text"),
    json_output: bool = typer.Option(False, "--json", help="Dump parsed document as JSON"),
):
    """Parse LRC and print stats."""
    doc, stats = parse_lrc_with_stats(_read(lrc_path), trim_start=trim_start, trim_end=trim_end)
    if json_output:
        typer.echo(export_json(doc))
        return
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lines_timed={stats.lines_timed}")
    typer.echo(f"lines_metadata={stats.lines_metadata}")
    typer.echo(f"lines_untimed={stats.lines_untimed}")
    typer.echo(f"lines_plain={stats.lines_plain}")
    typer.echo(f"words_timed={stats.words_timed}")
    typer.echo(f"info={dict(doc.info)}")


@app.command("format")
def format_cmd(
    lrc_path: Path,
    space_start: int | None = typer.Option(None, "--space-start", help="Spaces before lyric text (<0: keep)"),
    space_end: int | None = typer.Option(None, "--space-end", help="Spaces after lyric text (<0: keep)"),
    precision: int | None = typer.Option(None, "--precision", "-p", help="Fraction digits, 0-3"),
    eol: str | None = typer.Option(None, "--eol", case_sensitive=False, help="lf|crlf|cr"),
    trim_start: bool = typer.Option(False, "--trim-start"),
    trim_end: bool = typer.Option(False, "--trim-end"),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
):
    """Re-serialize LRC; unset options come from stored preferences."""
    prefs = load_preferences()
    if eol is not None and eol.lower() not in EOL_NAMES:
        raise typer.BadParameter("eol must be one of: lf, crlf, cr")
    try:
        opts = FormatOptions(
            space_start=prefs.space_start if space_start is None else space_start,
            space_end=prefs.space_end if space_end is None else space_end,
            precision=prefs.precision if precision is None else precision,
            line_terminator=prefs.line_terminator if eol is None else EOL_NAMES[eol.lower()],
        )
    except LrcError as e:
        raise typer.BadParameter(str(e)) from e

    doc, _stats = parse_lrc_with_stats(_read(lrc_path), trim_start=trim_start, trim_end=trim_end)
    data = export_lrc(doc, opts)

    if out:
        with out.open("w", encoding="utf-8", newline="") as f:
            f.write(data)
    else:
        typer.echo(data, nl=False)


@app.command()
def tag(
    seconds: float,
    precision: int = typer.Option(3, "--precision", "-p", help="Fraction digits, 0-3"),
    no_brackets: bool = typer.Option(False, "--no-brackets"),
):
    """Print the time tag for a number of seconds."""
    try:
        typer.echo(encode_time(seconds, precision, brackets=not no_brackets))
    except LrcError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


def _parse_assignment(raw: str) -> tuple[str, object]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}")
    try:
        return key, json.loads(value)
    except ValueError:
        # bare strings, e.g. lang=de-DE
        return key, value


@app.command()
def prefs(
    assignments: list[str] | None = typer.Option(None, "--set", help="KEY=VALUE, e.g. fixed=2"),
    reset: bool = typer.Option(False, "--reset", help="Restore defaults"),
):
    """Show or update stored preferences."""
    current = Preferences() if reset else load_preferences()
    if assignments:
        data = dict(_parse_assignment(a) for a in assignments)
        rejected = [k for k, v in data.items() if not is_valid_preference(k, v)]
        if rejected:
            raise typer.BadParameter(f"invalid or unknown preference(s): {', '.join(rejected)}")
        current = merge_preferences(current, data)
    if reset or assignments:
        path = save_preferences(current)
        typer.echo(f"Saved: {path}", err=True)
    typer.echo(dump_preferences(current))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
