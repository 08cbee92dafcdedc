"""
Sun Commands

Sunrise, sunset and twilight times for the observer location.
"""

import logging
from datetime import timedelta

import typer
from click import Context
from rich.table import Table
from typer.core import TyperGroup

from solar_twilight.api.astronomy.report import (
    diary_entries,
    format_clock_time,
    format_day_length,
    location_label,
    result_to_dict,
    sunrise_sunset_string,
)
from solar_twilight.api.astronomy.twilight import solve_for_location
from solar_twilight.api.core.enums import TwilightKind
from solar_twilight.api.core.exceptions import TwilightError
from solar_twilight.api.core.types import TwilightResult
from solar_twilight.api.location.observer import require_observer_location, zone_abbreviation
from solar_twilight.cli.utils.output import console, print_error, print_json
from solar_twilight.cli.utils.state import current_solar_error, get_state, parse_date


logger = logging.getLogger(__name__)


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Sunrise, sunset and twilight commands", cls=SortedCommandsGroup)

_KIND_TITLES = {
    TwilightKind.SUNRISE: "Sunrise / Sunset",
    TwilightKind.CIVIL: "Civil twilight",
    TwilightKind.NAUTICAL: "Nautical twilight",
    TwilightKind.ASTRONOMICAL: "Astronomical twilight",
}


def _clock(instant: float | None) -> str:
    if instant is None:
        return "[dim]—[/dim]"
    return format_clock_time(instant, get_state()["twelve_hour"])


@app.command("rise-set")
def rise_set(
    date_str: str | None = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD), default today"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show sunrise, sunset and hours of daylight.

    Example:
        twilight sun rise-set
        twilight sun rise-set --date 2024-03-20
    """
    day = parse_date(date_str)
    try:
        location = require_observer_location()
        result = solve_for_location(day, TwilightKind.SUNRISE, location, current_solar_error())
        if json_output:
            print_json(result_to_dict(result, TwilightKind.SUNRISE))
            return
        console.print(
            sunrise_sunset_string(
                result, location_label(location), zone_abbreviation(location, day), get_state()["twelve_hour"]
            )
        )
    except TwilightError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command("times")
def times(
    date_str: str | None = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD), default today"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show sunrise/sunset and all three twilights for one date.

    Example:
        twilight sun times --date 2024-06-21
        twilight sun times --json
    """
    day = parse_date(date_str)
    try:
        location = require_observer_location()
        solar_error = current_solar_error()
        results: dict[TwilightKind, TwilightResult] = {
            kind: solve_for_location(day, kind, location, solar_error) for kind in TwilightKind
        }
    except TwilightError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json([result_to_dict(result, kind) for kind, result in results.items()])
        return

    zone = zone_abbreviation(location, day)
    table = Table(title=f"{location_label(location)} on {day.isoformat()} ({zone})")
    table.add_column("Phenomenon", style="cyan")
    table.add_column("Altitude", justify="right", style="dim")
    table.add_column("Morning", justify="right", style="green")
    table.add_column("Evening", justify="right", style="green")
    table.add_column("Duration", justify="right")

    for kind, result in results.items():
        table.add_row(
            _KIND_TITLES[kind],
            f"{result.threshold:.2f}°",
            _clock(result.morning),
            _clock(result.evening),
            format_day_length(result.day_length),
        )

    console.print(table)


@app.command("diary")
def diary(
    date_str: str | None = typer.Option(None, "--date", "-d", help="Date (YYYY-MM-DD), default today"),
) -> None:
    """
    Print the diary annotations for a date, in chronological order.

    Example:
        twilight sun diary --date 2024-12-21
    """
    day = parse_date(date_str)
    try:
        lines = diary_entries(day, twelve_hour=get_state()["twelve_hour"], solar_error=current_solar_error())
    except TwilightError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"[bold]{day.isoformat()}[/bold]")
    for line in lines:
        console.print(f"  {line}")


@app.command("range")
def date_range(
    start: str | None = typer.Option(None, "--start", "-s", help="First date (YYYY-MM-DD), default today"),
    days: int = typer.Option(7, "--days", "-n", min=1, max=366, help="Number of days"),
    kind: TwilightKind = typer.Option(TwilightKind.SUNRISE, "--kind", "-k", help="Phenomenon to tabulate"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Tabulate one phenomenon over consecutive days.

    Example:
        twilight sun range --days 14
        twilight sun range --start 2024-06-01 --days 30 --kind astronomical
    """
    first = parse_date(start)
    try:
        location = require_observer_location()
        solar_error = current_solar_error()
        results = [
            solve_for_location(first + timedelta(days=offset), kind, location, solar_error) for offset in range(days)
        ]
    except TwilightError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json([result_to_dict(result, kind) for result in results])
        return

    table = Table(title=f"{_KIND_TITLES[kind]} at {location_label(location)}")
    table.add_column("Date", style="cyan")
    table.add_column("Zone", style="dim")
    table.add_column("Morning", justify="right", style="green")
    table.add_column("Evening", justify="right", style="green")
    table.add_column("Duration", justify="right")

    for result in results:
        table.add_row(
            result.date.isoformat(),
            zone_abbreviation(location, result.date),
            _clock(result.morning),
            _clock(result.evening),
            format_day_length(result.day_length),
        )

    console.print(table)
