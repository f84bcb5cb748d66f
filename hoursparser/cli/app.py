"""
Main CLI application using Typer.
"""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import HoursParserError
from ..domain.models import CanonicalDay, Schedule
from ..services.hours_parser import HoursParserService, ParseResult

app = typer.Typer(
    name="hoursparser",
    help="Turn free-text opening hours into a weekly schedule",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    JSON = "json"
    TABLE = "table"


def _configure_logging(config: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.get_log_level()
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    try:
        return AppConfig.load(config_file)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def _print_diagnostics(result: ParseResult) -> None:
    """Echo the input and its segmentation to stderr."""
    segmentation = json.dumps([token.text for token in result.tokens])
    err_console.out(f"Input:\t\t\t '{result.line.strip()}'", highlight=False)
    err_console.out(f"Entities Segmentation:\t '{segmentation}'", highlight=False)
    if result.ignored:
        ignored = ", ".join(f"{token.kind.value}:{token.text}" for token in result.ignored)
        err_console.print(f"[dim]Ignored:\t\t {escape(ignored)}[/dim]", markup=True, highlight=False)


def _render_table(result: ParseResult) -> None:
    table = Table(
        title=result.line.strip(),
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Hours")

    for day in CanonicalDay.week():
        ranges = result.schedule.ranges_for(day)
        hours = ", ".join(str(hour_range) for hour_range in ranges) or "[dim]closed[/dim]"
        table.add_row(day.value.capitalize(), hours)

    console.print(table)


def _render_day(schedule: Schedule, date: pendulum.DateTime, output: OutputFormat, indent: Optional[int]) -> None:
    """Render only the ranges for a single date's weekday."""
    day = CanonicalDay.week()[int(date.day_of_week)]
    hours = [str(hour_range) for hour_range in schedule.ranges_on(date)]

    if output is OutputFormat.TABLE:
        label = ", ".join(hours) or "closed"
        console.print(f"[bold]{date.format('YYYY-MM-DD')}[/bold] ({day.value.capitalize()}): {label}")
        return

    payload = {"date": date.format("YYYY-MM-DD"), "day": day.value, "hours": hours}
    console.out(json.dumps(payload, indent=indent), highlight=False)


def _read_lines(text: Optional[List[str]]) -> List[str]:
    if text:
        return list(text)
    return sys.stdin.read().splitlines()


@app.command()
def parse(
    text: Annotated[Optional[List[str]], typer.Argument(help="Opening hours strings. Reads lines from stdin if omitted.")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./hoursparser.yaml")] = None,
    output_format: Annotated[Optional[OutputFormat], typer.Option("--format", "-f", help="Output format (json or table)")] = None,
    on: Annotated[Optional[str], typer.Option("--on", help="Only show the hours for this date (YYYY-MM-DD)")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Suppress diagnostics on stderr.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Parse opening hours into a weekly schedule.

    Examples:

        hoursparser parse "Mon-Fri 9AM-5PM, Sat 10-2"

        echo "Weekday 8:30 A.M. to 6 P.M." | hoursparser parse --format table

        hoursparser parse "Mon-Fri 9-5" --on 2024-11-25
    """
    config = _load_config(config_file)
    _configure_logging(config, verbose)

    output = output_format or OutputFormat(config.output.format)
    show_diagnostics = config.output.show_diagnostics and not quiet
    indent = config.output.json_indent

    date = None
    if on:
        try:
            date = pendulum.from_format(on, "YYYY-MM-DD")
        except ValueError as e:
            err_console.print(f"[bold red]Error parsing date:[/bold red] {escape(str(e))}")
            raise typer.Exit(1)

    service = HoursParserService(normalize_meridiem=config.parser.normalize_meridiem)

    try:
        for result in service.parse_lines(_read_lines(text)):
            if show_diagnostics:
                _print_diagnostics(result)

            if date is not None:
                _render_day(result.schedule, date, output, indent)
            elif output is OutputFormat.TABLE:
                _render_table(result)
            else:
                console.out(result.schedule.to_json(indent=indent), highlight=False)

            if show_diagnostics:
                err_console.out("#" * 80, highlight=False)

    except HoursParserError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def tokens(
    text: Annotated[str, typer.Argument(help="Opening hours string to segment.")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Show how a string is segmented into typed tokens.
    """
    config = _load_config(config_file)
    service = HoursParserService(normalize_meridiem=config.parser.normalize_meridiem)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim")
    table.add_column("Kind", style="bold yellow")
    table.add_column("Text")

    for idx, token in enumerate(service.tokenize(text), 1):
        table.add_row(str(idx), token.kind.value, token.text)

    console.print(table)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"[bold cyan]hoursparser[/bold cyan] version [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
