"""
Location Commands

Commands for managing the observer location used by every calculation.
"""

from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from click import Context
from rich.table import Table
from typer.core import TyperGroup

from solar_twilight.api.core.exceptions import TwilightError
from solar_twilight.api.location.observer import (
    ObserverLocation,
    clear_observer_location,
    derive_location,
    get_config_path,
    get_observer_location,
    resolve_utc_offset_minutes,
    set_observer_location,
    zone_abbreviation,
)
from solar_twilight.cli.utils.output import (
    console,
    format_coordinates,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


app = typer.Typer(help="Observer location commands", cls=SortedCommandsGroup)


@app.command("set")
def set_location(
    latitude: float = typer.Option(..., "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float = typer.Option(..., "--lon", help="Longitude in degrees (-180 to +180, East is positive)"),
    offset: int | None = typer.Option(None, "--offset", help="UTC offset in minutes (e.g. -300 for EST)"),
    tz: str | None = typer.Option(None, "--tz", help="IANA time zone (e.g. America/New_York), enables DST"),
    name: str | None = typer.Option(None, "--name", help="Display name of the location"),
    derive: bool = typer.Option(False, "--derive", help="Look up the time zone from the coordinates"),
) -> None:
    """
    Set observer location.

    A UTC offset or a time zone is required before times can be computed;
    --derive looks the time zone up from the coordinates.

    Example:
        # Washington, DC with daylight saving
        twilight location set --lat 38.9 --lon -77.0 --tz America/New_York --name "Washington, DC"

        # Fixed offset only
        twilight location set --lat 38.9 --lon -77.0 --offset -300

        # Look up the zone
        twilight location set --lat 51.5074 --lon -0.1278 --derive
    """
    # Validate coordinates
    if not -90 <= latitude <= 90:
        print_error("Latitude must be between -90 and +90 degrees")
        raise typer.Exit(code=1) from None
    if not -180 <= longitude <= 180:
        print_error("Longitude must be between -180 and +180 degrees")
        raise typer.Exit(code=1) from None
    if tz is not None:
        try:
            ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as e:
            print_error(f"Unknown time zone: {tz}")
            raise typer.Exit(code=1) from e

    location = ObserverLocation(
        latitude=latitude,
        longitude=longitude,
        utc_offset_minutes=offset,
        timezone=tz,
        name=name,
    )

    try:
        if derive:
            location = derive_location(location)
            print_info(f"Time zone: {location.timezone}")
        set_observer_location(location)
    except TwilightError as e:
        print_error(f"Failed to set location: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Location set to {format_coordinates(latitude, longitude)}")
    if not location.is_complete:
        print_warning("No UTC offset or time zone given; pass --offset, --tz or --derive before computing times")


@app.command("show")
def show_location(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the configured observer location.

    Example:
        twilight location show
        twilight location show --json
    """
    try:
        location = get_observer_location()
    except TwilightError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if location is None:
        print_warning("No observer location configured. Use 'twilight location set'.")
        raise typer.Exit(code=1)

    today = date.today()
    offset: int | None = None
    zone: str | None = None
    if location.is_complete:
        try:
            offset = resolve_utc_offset_minutes(location, today)
            zone = zone_abbreviation(location, today)
        except TwilightError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    if json_output:
        print_json(
            {
                "name": location.name,
                "latitude": location.latitude,
                "longitude": location.longitude,
                "utc_offset_minutes": location.utc_offset_minutes,
                "timezone": location.timezone,
                "current_utc_offset_minutes": offset,
                "current_zone": zone,
                "config_file": str(get_config_path()),
            }
        )
        return

    table = Table(title="Observer Location")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Name", location.name or "[dim]unnamed[/dim]")
    table.add_row("Coordinates", format_coordinates(location.latitude, location.longitude))
    table.add_row("Time zone", location.timezone or "[dim]none[/dim]")
    if location.utc_offset_minutes is not None:
        table.add_row("UTC offset", f"{location.utc_offset_minutes} min")
    else:
        table.add_row("UTC offset", "[dim]none[/dim]")
    if zone is not None:
        table.add_row("Today", f"{zone} ({offset} min)")
    console.print(table)


@app.command("clear")
def clear_location() -> None:
    """
    Forget the saved observer location.

    Example:
        twilight location clear
    """
    config_path = get_config_path()
    if config_path.exists():
        config_path.unlink()
    clear_observer_location()
    print_success("Observer location cleared")
