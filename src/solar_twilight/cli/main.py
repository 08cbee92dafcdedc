"""
Solar Twilight CLI - Main Application

This is the main entry point for the twilight command-line interface.
"""

import logging

import typer
from click import Context
from dotenv import load_dotenv
from rich.console import Console
from typer.core import TyperGroup

from solar_twilight.api.core.utils import configure_astropy_iers
from solar_twilight.cli.commands import location, sun
from solar_twilight.cli.utils.state import set_state


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="twilight",
    help="Sunrise, sunset and twilight times",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    solar_error: float | None = typer.Option(
        None,
        "--solar-error",
        help="Convergence tolerance in minutes of time (default 0.5)",
        envvar="TWILIGHT_SOLAR_ERROR",
    ),
    twenty_four_hour: bool = typer.Option(
        False,
        "--24h",
        help="Show 24-hour clock times",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Solar Twilight CLI

    Compute sunrise, sunset and civil, nautical and astronomical twilight.

    [bold green]Examples:[/bold green]

        twilight location set --lat 38.9 --lon -77.0 --tz America/New_York
        twilight sun times --date 2024-03-20
        twilight sun diary

    [bold blue]Environment Variables:[/bold blue]

        TWILIGHT_SOLAR_ERROR - Convergence tolerance in minutes
        TWILIGHT_CONFIG_DIR  - Directory holding observer_location.json
    """
    configure_astropy_iers()
    load_dotenv()

    set_state(solar_error=solar_error, twelve_hour=not twenty_four_hour, verbose=verbose)

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from solar_twilight import __version__

    console.print(f"[bold]Solar Twilight CLI[/bold] version [cyan]{__version__}[/cyan]")


# Register command groups
app.add_typer(
    sun.app,
    name="sun",
    help="Sunrise, sunset and twilight times",
    rich_help_panel="Calculations",
)
app.add_typer(
    location.app,
    name="location",
    help="Observer location",
    rich_help_panel="Configuration",
)


if __name__ == "__main__":
    app()
