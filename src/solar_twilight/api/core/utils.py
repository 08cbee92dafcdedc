"""
Utility functions for solar twilight calculations.

Julian Date conversion uses Astropy; time zone lookup uses timezonefinder.
"""

from __future__ import annotations

import logging
import warnings
from datetime import UTC, date, datetime, time
from zoneinfo import ZoneInfo

from astropy.time import Time
from astropy.utils import iers
from astropy.utils.exceptions import AstropyWarning
from timezonefinder import TimezoneFinder

from .constants import DAYS_PER_JULIAN_CENTURY, JULIAN_DATE_J2000


logger = logging.getLogger(__name__)


__all__ = [
    "calculate_julian_date",
    "configure_astropy_iers",
    "date_to_julian_centuries",
    "get_local_timezone",
]

# Global timezone finder instance (created on first use)
_tz_finder: TimezoneFinder | None = None


def _get_tz_finder() -> TimezoneFinder:
    global _tz_finder
    if _tz_finder is None:
        _tz_finder = TimezoneFinder()
    return _tz_finder


def configure_astropy_iers() -> None:
    """
    Configure Astropy IERS (International Earth Rotation Service) data handling.

    Uses only the IERS tables bundled with Astropy. Automatic downloads are
    turned off, and times past the end of the bundled tables fall back to
    extrapolated Earth orientation instead of raising. For sunrise and
    twilight times the resulting error (well under a second of time) does
    not matter.

    Suppresses warnings about:
    - Polar motion data extrapolation for future dates
    - A stale bundled leap-second file

    Should be called early in application startup, before any Time objects are created.
    """
    iers.conf.auto_download = False
    iers.conf.iers_degraded_accuracy = "ignore"

    warnings.filterwarnings(
        "ignore",
        message=".*Tried to get polar motions for times after IERS data is valid.*",
        category=UserWarning,
    )
    warnings.filterwarnings("ignore", message=".*leap-second.*", category=AstropyWarning)
    logger.debug("Astropy IERS configuration applied")


def calculate_julian_date(dt: datetime) -> float:
    """
    Calculate Julian Date from datetime.

    Args:
        dt: datetime object (naive values are taken as UTC)

    Returns:
        Julian Date
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(UTC).replace(tzinfo=None)
    return float(Time(dt, scale="utc").jd)


def date_to_julian_centuries(day: date) -> float:
    """
    Julian centuries from J2000.0 to 0h UT of a calendar date.

    Args:
        day: Calendar date

    Returns:
        Signed number of Julian centuries
    """
    jd = calculate_julian_date(datetime.combine(day, time(0, 0)))
    return (jd - JULIAN_DATE_J2000) / DAYS_PER_JULIAN_CENTURY


def get_local_timezone(lat: float, lon: float) -> ZoneInfo | None:
    """
    Get timezone for a given latitude and longitude.

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        ZoneInfo object for the timezone, or None if timezone cannot be determined
    """
    tz_name = _get_tz_finder().timezone_at(lat=lat, lng=lon)
    if not tz_name:
        logger.debug(f"No time zone found for ({lat:.4f}, {lon:.4f})")
        return None
    return ZoneInfo(tz_name)
