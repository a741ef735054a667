"""CLI for streamfmt: render / check commands over recorded event files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from streamfmt.core.config import AppSettings, WriterConfig
from streamfmt.core.logging_config import setup_logging
from streamfmt.exceptions import StreamFmtError
from streamfmt.formatters.json_writer import JsonWriter
from streamfmt.replay import load_events, max_depth, replay_events

app = typer.Typer(name="streamfmt", help="Render structural event streams as JSON-like text")
console = Console()
err_console = Console(stderr=True)

log = logging.getLogger(__name__)


def _build_settings(
    compact: Optional[bool],
    indent_step: Optional[int],
    lenient: bool,
    legacy_array_cursor: bool,
    verbose: bool,
) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    settings = AppSettings()
    overrides: dict = {}
    if compact is not None:
        overrides["compact"] = compact
    if indent_step is not None:
        overrides["indent_step"] = indent_step
    if lenient:
        overrides["strict"] = False
    if legacy_array_cursor:
        overrides["legacy_array_cursor"] = True
    if overrides:
        merged = settings.writer.model_dump() | overrides
        settings.writer = WriterConfig.model_validate(merged)
    if verbose:
        settings.observability.log_level = "DEBUG"
    return settings


def _fail(exc: Exception) -> NoReturn:
    log.warning("streamfmt failed: %s", exc)
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


@app.command()
def render(
    events_file: Path = typer.Argument(..., help="JSON file with recorded events"),
    compact: Optional[bool] = typer.Option(None, "--compact/--pretty", help="Single-line output"),
    indent_step: Optional[int] = typer.Option(None, "--indent-step", min=1, max=16),
    lenient: bool = typer.Option(False, "--lenient", help="Skip begin/end balance checks"),
    legacy_array_cursor: bool = typer.Option(
        False, "--legacy-array-cursor", help="Keep the parent cursor when opening arrays"
    ),
    output: Optional[Path] = typer.Option(None, help="Write the document here instead of stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Replay an event file and print the rendered document."""
    settings = _build_settings(compact, indent_step, lenient, legacy_array_cursor, verbose)
    setup_logging(settings.observability)

    try:
        events = load_events(events_file)
        writer = JsonWriter(settings.writer)
        replay_events(writer, events)
        if output:
            writer.write_to_file(output)
        else:
            text = writer.getvalue()
    except StreamFmtError as exc:
        _fail(exc)

    if output:
        console.print(f"[green]Document saved to {output}[/green]")
    else:
        typer.echo(text, nl=False)


@app.command()
def check(
    events_file: Path = typer.Argument(..., help="JSON file with recorded events"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Replay an event file in strict mode and report whether it balances."""
    settings = _build_settings(None, None, False, False, verbose)
    setup_logging(settings.observability)

    try:
        events = load_events(events_file)
    except StreamFmtError as exc:
        _fail(exc)

    result = "[green]balanced[/green]"
    failed = False
    try:
        replay_events(JsonWriter(settings.writer, strict=True), events).getvalue()
    except StreamFmtError as exc:
        result = f"[red]{escape(str(exc))}[/red]"
        failed = True

    table = Table(title=f"Event stream {events_file.name}")
    table.add_column("Events", justify="right")
    table.add_column("Max depth", justify="right")
    table.add_column("Result")
    table.add_row(str(len(events)), str(max_depth(events)), result)
    console.print(table)

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
