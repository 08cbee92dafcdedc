"""
Observer Location Management

Manages the observer's geographic location used by every twilight solve.
The location is process-wide configuration: it is cached in memory and
persisted as JSON in the user's config directory.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from datetime import UTC, date, datetime, time
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import deal

from ..core.exceptions import InvalidConfigurationError, LocationNotSetError, TimezoneNotFoundError
from ..core.utils import get_local_timezone


logger = logging.getLogger(__name__)


__all__ = [
    "CONFIG_DIR_ENV_VAR",
    "ObserverLocation",
    "clear_observer_location",
    "derive_location",
    "get_config_path",
    "get_observer_location",
    "load_location",
    "require_observer_location",
    "resolve_utc_offset_minutes",
    "save_location",
    "set_observer_location",
    "zone_abbreviation",
]

CONFIG_DIR_ENV_VAR = "TWILIGHT_CONFIG_DIR"


@dataclass(frozen=True)
class ObserverLocation:
    """Observer's geographic location."""

    latitude: float  # Degrees north (negative for south)
    longitude: float  # Degrees east (negative for west)
    utc_offset_minutes: int | None = None  # Standard offset from UTC in minutes
    timezone: str | None = None  # IANA zone name, enables DST handling
    elevation: float = 0.0  # Meters above sea level
    name: str | None = None  # Optional location name

    @property
    def is_complete(self) -> bool:
        """True when latitude, longitude and UTC offset are all known."""
        return self.utc_offset_minutes is not None or self.timezone is not None


# Global current location
_current_location: ObserverLocation | None = None


def get_config_path() -> Path:
    """Get path to observer location config file."""
    env_dir = os.environ.get(CONFIG_DIR_ENV_VAR)
    config_dir = Path(env_dir) if env_dir else Path.home() / ".config" / "solar-twilight"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "observer_location.json"


@deal.pre(lambda location: location is not None, message="Location must be provided")  # type: ignore[misc,arg-type]
@deal.pre(lambda location: -90 <= location.latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda location: -180 <= location.longitude <= 180, message="Longitude must be -180 to +180")  # type: ignore[misc,arg-type]
@deal.post(lambda result: result is None, message="Save must complete")
def save_location(location: ObserverLocation) -> None:
    """
    Save observer location to config file.

    Args:
        location: Observer location to save
    """
    config_path = get_config_path()
    logger.info(
        f"Saving observer location: {location.name or 'Unnamed'} ({location.latitude:.4f}, {location.longitude:.4f})"
    )

    with config_path.open("w") as f:
        json.dump(asdict(location), f, indent=2)

    logger.debug(f"Location saved to {config_path}")


@deal.raises(InvalidConfigurationError)
def load_location() -> ObserverLocation | None:
    """
    Load observer location from config file.

    Returns:
        Saved observer location, or None if nothing has been configured

    Raises:
        InvalidConfigurationError: If the config file cannot be parsed
    """
    config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No saved location found at {config_path}")
        return None

    try:
        with config_path.open() as f:
            data = json.load(f)
        location = ObserverLocation(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            utc_offset_minutes=(
                int(data["utc_offset_minutes"]) if data.get("utc_offset_minutes") is not None else None
            ),
            timezone=data.get("timezone"),
            elevation=float(data.get("elevation", 0.0)),
            name=data.get("name"),
        )
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise InvalidConfigurationError(f"Could not read observer location from {config_path}: {e}") from e

    logger.info(f"Loaded observer location: {location.name or 'Unnamed'}")
    return location


def get_observer_location() -> ObserverLocation | None:
    """
    Get current observer location.

    Returns cached location if set, otherwise loads from config.

    Returns:
        Current observer location, or None if none is configured
    """
    global _current_location

    if _current_location is None:
        _current_location = load_location()

    return _current_location


@deal.pre(lambda location, save=True: location is not None, message="Location must be provided")  # type: ignore[misc,arg-type]
@deal.pre(lambda location, save=True: -90 <= location.latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda location, save=True: -180 <= location.longitude <= 180, message="Longitude must be -180 to +180")  # type: ignore[misc,arg-type]
def set_observer_location(location: ObserverLocation, save: bool = True) -> None:
    """
    Set current observer location.

    Args:
        location: New observer location
        save: Whether to save to config file (default: True)
    """
    global _current_location
    _current_location = location

    if save:
        save_location(location)


@deal.post(lambda result: result is None, message="Clear must complete")
def clear_observer_location() -> None:
    """Clear cached observer location (will reload from config on next access)."""
    global _current_location
    _current_location = None


@deal.raises(LocationNotSetError, InvalidConfigurationError)
def require_observer_location(location: ObserverLocation | None = None) -> ObserverLocation:
    """
    Return a location that is complete enough to solve with.

    Args:
        location: Explicit location; the configured one is used when omitted

    Returns:
        The location

    Raises:
        LocationNotSetError: If no location is configured or its UTC offset is unknown
    """
    if location is None:
        location = get_observer_location()
    if location is None:
        raise LocationNotSetError("Observer location is not configured. Run 'twilight location set' first.")
    if not location.is_complete:
        raise LocationNotSetError(
            f"UTC offset of {location.name or 'the observer location'} is not configured. "
            "Set it explicitly or derive it from the coordinates."
        )
    return location


def _zone(location: ObserverLocation) -> ZoneInfo | None:
    if location.timezone is None:
        return None
    try:
        return ZoneInfo(location.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidConfigurationError(f"Unknown time zone: {location.timezone}") from e


def _local_noon(location: ObserverLocation, day: date) -> datetime | None:
    zone = _zone(location)
    if zone is None:
        return None
    return datetime.combine(day, time(12, 0), tzinfo=zone)


def resolve_utc_offset_minutes(location: ObserverLocation, day: date) -> int:
    """
    UTC offset in effect at the location on ``day``, including daylight saving.

    A configured IANA zone wins over the fixed offset.

    Args:
        location: Observer location
        day: Local calendar date

    Returns:
        Offset in minutes east of UTC
    """
    noon = _local_noon(location, day)
    if noon is not None:
        offset = noon.utcoffset()
        if offset is not None:
            return int(offset.total_seconds() // 60)
    if location.utc_offset_minutes is None:
        raise LocationNotSetError("UTC offset is not configured")
    return location.utc_offset_minutes


def zone_abbreviation(location: ObserverLocation, day: date) -> str:
    """
    Display name of the time zone in effect on ``day`` (e.g. "EST", "EDT").

    Falls back to a "UTC+hh:mm" label when only a fixed offset is known.
    """
    noon = _local_noon(location, day)
    if noon is not None:
        name = noon.tzname()
        if name:
            return name
    minutes = resolve_utc_offset_minutes(location, day)
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"UTC{sign}{hours:02d}:{mins:02d}"


@deal.raises(TimezoneNotFoundError)
def derive_location(location: ObserverLocation, day: date | None = None) -> ObserverLocation:
    """
    Fill in the time zone and standard UTC offset from coordinates.

    This is the explicit setup step for a location known only by its
    coordinates.

    Args:
        location: Location with at least latitude and longitude
        day: Date whose offset is recorded as ``utc_offset_minutes`` (default: today)

    Returns:
        A new location with ``timezone`` and ``utc_offset_minutes`` set

    Raises:
        TimezoneNotFoundError: If timezonefinder knows no zone for the coordinates
    """
    zone = get_local_timezone(location.latitude, location.longitude)
    if zone is None:
        raise TimezoneNotFoundError(f"Timezone not found: lat={location.latitude}, lon={location.longitude}")

    if day is None:
        day = datetime.now(UTC).date()
    offset = datetime.combine(day, time(12, 0), tzinfo=zone).utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0

    logger.info(f"Derived time zone {zone.key} (UTC offset {minutes} min) for {location.name or 'location'}")
    return replace(location, timezone=zone.key, utc_offset_minutes=minutes)
