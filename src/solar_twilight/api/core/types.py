"""
Type definitions for solar twilight calculations.

This module contains the immutable value types passed between the
ephemeris adapter, the crossing solver and the report layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple


__all__ = [
    "EquatorialCoordinates",
    "TimePair",
    "TwilightResult",
]


@dataclass(frozen=True)
class TimePair:
    """
    Time coordinate handed to the ephemeris.

    Attributes:
        century: Julian centuries from J2000.0 to 0h UT of ``date``
        ut_hour: Hours of day UT (may fall outside 0-24 during a search)
        date: UT calendar date that ``century`` refers to
    """

    century: float
    ut_hour: float
    date: date

    def at(self, ut_hour: float) -> TimePair:
        """Return a pair on the same day at a different UT hour."""
        return TimePair(century=self.century, ut_hour=ut_hour, date=self.date)

    def __str__(self) -> str:
        return f"T={self.century:.9f} UT={self.ut_hour:.4f}h ({self.date.isoformat()})"


@dataclass(frozen=True)
class EquatorialCoordinates:
    """
    Equatorial coordinates of the Sun.

    Attributes:
        ra_degrees: Right Ascension in degrees (0-360)
        dec_degrees: Declination in degrees (-90 to +90)
    """

    ra_degrees: float
    dec_degrees: float

    def __str__(self) -> str:
        sign = "+" if self.dec_degrees >= 0 else "-"
        return f"RA {self.ra_degrees:.4f}°, Dec {sign}{abs(self.dec_degrees):.4f}°"


class TwilightResult(NamedTuple):
    """Crossing times for one threshold on one date."""

    morning: float | None  # Local clock hours of the morning crossing, None if absent
    evening: float | None  # Local clock hours of the evening crossing, None if absent
    day_length: float  # Hours between crossings, or exactly 24 / 0 when degenerate
    threshold: float  # Solar altitude in degrees
    date: date  # Requested local calendar date
