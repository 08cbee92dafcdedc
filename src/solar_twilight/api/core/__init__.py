"""Core subpackage for shared types, utilities, and exceptions."""

from solar_twilight.api.core.enums import Direction, TwilightKind
from solar_twilight.api.core.types import TimePair, TwilightResult
from solar_twilight.api.core.utils import (
    calculate_julian_date,
    date_to_julian_centuries,
    get_local_timezone,
)


__all__ = [
    "Direction",
    "TimePair",
    "TwilightKind",
    "TwilightResult",
    "calculate_julian_date",
    "date_to_julian_centuries",
    "get_local_timezone",
]
