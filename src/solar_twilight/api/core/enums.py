"""
Common Enums

Enumerations used throughout the solar-twilight API.
"""

from enum import StrEnum

from .constants import (
    ASTRONOMICAL_TWILIGHT_ALTITUDE,
    CIVIL_TWILIGHT_ALTITUDE,
    NAUTICAL_TWILIGHT_ALTITUDE,
    SUNRISE_ALTITUDE,
)


__all__ = [
    "Direction",
    "TwilightKind",
]


class Direction(StrEnum):
    """Side of local solar noon on which a crossing is searched."""

    MORNING = "morning"
    EVENING = "evening"

    @property
    def sign(self) -> int:
        """-1 for the morning (before noon), +1 for the evening (after noon)."""
        return -1 if self is Direction.MORNING else 1


class TwilightKind(StrEnum):
    """Solar phenomena defined by the Sun's center crossing a fixed altitude."""

    SUNRISE = "sunrise"  # Sunrise / sunset
    CIVIL = "civil"  # Civil twilight
    NAUTICAL = "nautical"  # Nautical twilight
    ASTRONOMICAL = "astronomical"  # Astronomical twilight

    @property
    def threshold(self) -> float:
        """Altitude of the Sun's center in degrees defining this phenomenon."""
        return _THRESHOLDS[self]


_THRESHOLDS: dict[TwilightKind, float] = {
    TwilightKind.SUNRISE: SUNRISE_ALTITUDE,
    TwilightKind.CIVIL: CIVIL_TWILIGHT_ALTITUDE,
    TwilightKind.NAUTICAL: NAUTICAL_TWILIGHT_ALTITUDE,
    TwilightKind.ASTRONOMICAL: ASTRONOMICAL_TWILIGHT_ALTITUDE,
}
