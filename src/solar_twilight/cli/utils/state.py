"""
CLI State Management

Options set on the root command and shared by every subcommand.
"""

from datetime import date
from typing import Any

import typer

from solar_twilight.api.core.exceptions import TwilightError
from solar_twilight.api.core.settings import get_solar_error
from solar_twilight.cli.utils.output import print_error


_cli_state: dict[str, Any] = {
    "solar_error": None,
    "twelve_hour": True,
    "verbose": False,
}


def get_state() -> dict[str, Any]:
    """Get the shared CLI state."""
    return _cli_state


def set_state(**values: Any) -> None:
    """Update the shared CLI state."""
    _cli_state.update(values)


def current_solar_error() -> float:
    """Convergence tolerance from --solar-error or the environment."""
    try:
        return get_solar_error(_cli_state["solar_error"])
    except TwilightError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def parse_date(value: str | None) -> date:
    """Parse a YYYY-MM-DD option, defaulting to today."""
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        print_error(f"Invalid date '{value}', expected YYYY-MM-DD")
        raise typer.Exit(code=1) from e
