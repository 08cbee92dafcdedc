"""
Twilight Reports

Human-readable lines for sunrise, sunset and twilight, plus the registry of
diary entries a calendar can attach to each date.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, NamedTuple

from ..core.constants import DEFAULT_SOLAR_ERROR, HOURS_PER_DAY, MINUTES_PER_HOUR
from ..core.enums import Direction, TwilightKind
from ..core.types import TwilightResult
from ..location.observer import ObserverLocation, require_observer_location, zone_abbreviation
from .twilight import solve_for_location


logger = logging.getLogger(__name__)

__all__ = [
    "DIARY_ENTRIES",
    "DiaryEntry",
    "LocationName",
    "diary_entries",
    "diary_entry",
    "event_line",
    "format_clock_time",
    "format_day_length",
    "location_label",
    "result_to_dict",
    "sunrise_sunset_string",
    "twilight_lines",
]

LocationName = str | Callable[[ObserverLocation], str] | None


class _EventNames(NamedTuple):
    morning: str
    evening: str
    no_morning: str
    no_evening: str


_EVENT_NAMES: dict[TwilightKind, _EventNames] = {
    TwilightKind.SUNRISE: _EventNames("Sunrise", "Sunset", "No sunrise", "No sunset"),
    TwilightKind.CIVIL: _EventNames(
        "Civil twilight begins", "Civil twilight ends", "No civil twilight", "No civil twilight"
    ),
    TwilightKind.NAUTICAL: _EventNames(
        "Nautical twilight begins", "Nautical twilight ends", "No nautical twilight", "No nautical twilight"
    ),
    TwilightKind.ASTRONOMICAL: _EventNames(
        "Astronomical twilight begins",
        "Astronomical twilight ends",
        "No astronomical twilight",
        "No astronomical twilight",
    ),
}


def format_clock_time(hours: float, twelve_hour: bool = True) -> str:
    """
    Format local clock hours for display.

    Args:
        hours: Hours since local midnight
        twelve_hour: Use "6:12am" style instead of "06:12"

    Returns:
        Formatted time rounded to the minute
    """
    total = round(hours * MINUTES_PER_HOUR) % int(HOURS_PER_DAY * MINUTES_PER_HOUR)
    hour, minute = divmod(total, 60)
    if not twelve_hour:
        return f"{hour:02d}:{minute:02d}"
    suffix = "am" if hour < 12 else "pm"
    return f"{(hour % 12) or 12}:{minute:02d}{suffix}"


def format_day_length(hours: float) -> str:
    """Format a duration in hours as "h:mm" (e.g. "10:18")."""
    hour, minute = divmod(round(hours * MINUTES_PER_HOUR), 60)
    return f"{hour}:{minute:02d}"


def location_label(location: ObserverLocation, name: LocationName = None) -> str:
    """
    Display name of a location.

    Args:
        location: Observer location
        name: Fixed name or a callback producing one (default: the location's own name)

    Returns:
        The name, or formatted coordinates when none is known
    """
    if callable(name):
        return name(location)
    if name:
        return name
    if location.name:
        return location.name
    lat_dir = "N" if location.latitude >= 0 else "S"
    lon_dir = "E" if location.longitude >= 0 else "W"
    return f"{abs(location.latitude):.2f}°{lat_dir}, {abs(location.longitude):.2f}°{lon_dir}"


def event_line(result: TwilightResult, kind: TwilightKind, direction: Direction, twelve_hour: bool = True) -> str:
    """One report line, e.g. "6:12am: Sunrise" or "No astronomical twilight"."""
    names = _EVENT_NAMES[kind]
    if direction is Direction.MORNING:
        instant, label, missing = result.morning, names.morning, names.no_morning
    else:
        instant, label, missing = result.evening, names.evening, names.no_evening
    if instant is None:
        return missing
    return f"{format_clock_time(instant, twelve_hour)}: {label}"


def twilight_lines(result: TwilightResult, kind: TwilightKind, twelve_hour: bool = True) -> list[str]:
    """Morning and evening lines for one phenomenon."""
    return [
        event_line(result, kind, Direction.MORNING, twelve_hour),
        event_line(result, kind, Direction.EVENING, twelve_hour),
    ]


def sunrise_sunset_string(
    result: TwilightResult,
    location_name: str | None = None,
    zone_name: str | None = None,
    twelve_hour: bool = True,
) -> str:
    """
    Sunrise and sunset summarised on one line.

    Example:
        "Sunrise 6:12am (EST), sunset 5:30pm (EST) at Washington, DC (10:18 hours daylight)"
    """
    zone = f" ({zone_name})" if zone_name else ""
    rise = "No sunrise"
    if result.morning is not None:
        rise = f"Sunrise {format_clock_time(result.morning, twelve_hour)}{zone}"
    set_ = "no sunset"
    if result.evening is not None:
        set_ = f"sunset {format_clock_time(result.evening, twelve_hour)}{zone}"
    place = f" at {location_name}" if location_name else ""
    return f"{rise}, {set_}{place} ({format_day_length(result.day_length)} hours daylight)"


def result_to_dict(result: TwilightResult, kind: TwilightKind | None = None) -> dict[str, Any]:
    """JSON-friendly representation of a result."""
    return {
        "kind": str(kind) if kind is not None else None,
        "date": result.date.isoformat(),
        "threshold": result.threshold,
        "morning": format_clock_time(result.morning, twelve_hour=False) if result.morning is not None else None,
        "evening": format_clock_time(result.evening, twelve_hour=False) if result.evening is not None else None,
        "day_length": format_day_length(result.day_length),
        "day_length_hours": round(result.day_length, 4),
    }


class DiaryEntry(NamedTuple):
    """A diary hook producing one annotation line for a date."""

    kind: TwilightKind
    direction: Direction | None  # None for the combined sunrise/sunset line


DIARY_ENTRIES: dict[str, DiaryEntry] = {
    "morning_astronomical_twilight": DiaryEntry(TwilightKind.ASTRONOMICAL, Direction.MORNING),
    "morning_nautical_twilight": DiaryEntry(TwilightKind.NAUTICAL, Direction.MORNING),
    "morning_civil_twilight": DiaryEntry(TwilightKind.CIVIL, Direction.MORNING),
    "sunrise": DiaryEntry(TwilightKind.SUNRISE, Direction.MORNING),
    "sunset": DiaryEntry(TwilightKind.SUNRISE, Direction.EVENING),
    "evening_civil_twilight": DiaryEntry(TwilightKind.CIVIL, Direction.EVENING),
    "evening_nautical_twilight": DiaryEntry(TwilightKind.NAUTICAL, Direction.EVENING),
    "evening_astronomical_twilight": DiaryEntry(TwilightKind.ASTRONOMICAL, Direction.EVENING),
    "sunrise_sunset": DiaryEntry(TwilightKind.SUNRISE, None),
}
"""Diary hooks by name, in chronological order of the events they annotate."""


def diary_entry(
    name: str,
    day: date,
    location: ObserverLocation | None = None,
    location_name: LocationName = None,
    twelve_hour: bool = True,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> str:
    """
    Text of a single diary hook for ``day``.

    Args:
        name: Key of ``DIARY_ENTRIES``
        day: Local calendar date
        location: Observer location (default: the configured one)
        location_name: Display name or callback for the combined line
        twelve_hour: Use 12-hour clock times
        solar_error: Convergence tolerance in minutes of time

    Raises:
        KeyError: If ``name`` is not a registered entry
        LocationNotSetError: If no complete location is available
    """
    entry = DIARY_ENTRIES[name]
    observer = require_observer_location(location)
    result = solve_for_location(day, entry.kind, observer, solar_error)
    if entry.direction is not None:
        return event_line(result, entry.kind, entry.direction, twelve_hour)
    return sunrise_sunset_string(
        result,
        location_label(observer, location_name),
        zone_abbreviation(observer, day),
        twelve_hour,
    )


def diary_entries(
    day: date,
    location: ObserverLocation | None = None,
    location_name: LocationName = None,
    twelve_hour: bool = True,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> list[str]:
    """
    All eight event lines for ``day`` in chronological order, followed by the
    combined sunrise/sunset summary.

    Each phenomenon is solved once and shared between its morning and
    evening lines.
    """
    observer = require_observer_location(location)
    results = {kind: solve_for_location(day, kind, observer, solar_error) for kind in TwilightKind}
    logger.debug(f"Computed diary entries for {day} at {location_label(observer)}")

    lines = []
    for entry in DIARY_ENTRIES.values():
        result = results[entry.kind]
        if entry.direction is None:
            lines.append(
                sunrise_sunset_string(
                    result,
                    location_label(observer, location_name),
                    zone_abbreviation(observer, day),
                    twelve_hour,
                )
            )
        else:
            lines.append(event_line(result, entry.kind, entry.direction, twelve_hour))
    return lines
