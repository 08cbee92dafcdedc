"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from typing import Any

from rich.console import Console


# Create console with unicode detection
console = Console()

_use_unicode = console.is_terminal and not console.legacy_windows


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any] | list[Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format coordinates as e.g. "38.9000°N, 77.0000°W"."""
    lat_dir = "N" if latitude >= 0 else "S"
    lon_dir = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.4f}°{lat_dir}, {abs(longitude):.4f}°{lon_dir}"
