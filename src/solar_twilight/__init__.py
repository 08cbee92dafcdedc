"""
Solar Twilight

Sunrise, sunset and civil, nautical and astronomical twilight times for a
calendar date and observer location.

Every phenomenon is solved by the same bisection search for the moment the
Sun's center crosses a fixed altitude:

- Sunrise / sunset: -0.61°
- Civil twilight: -6°
- Nautical twilight: -12°
- Astronomical twilight: -18°

Example:
    >>> from datetime import date
    >>> from solar_twilight import sunrise_sunset, format_clock_time
    >>> result = sunrise_sunset(date(2024, 3, 20), 38.9, -77.0, utc_offset_minutes=-300)
    >>> print(format_clock_time(result.morning), format_clock_time(result.evening))
"""

# Solver
from solar_twilight.api.astronomy.report import (
    DIARY_ENTRIES,
    diary_entries,
    diary_entry,
    format_clock_time,
    format_day_length,
    sunrise_sunset_string,
    twilight_lines,
)
from solar_twilight.api.astronomy.twilight import (
    astronomical_twilight,
    civil_twilight,
    find_crossing,
    nautical_twilight,
    solve_for_location,
    sunrise_sunset,
    twilight_for_kind,
    twilight_for_threshold,
)

# Type definitions
from solar_twilight.api.core.enums import Direction, TwilightKind

# Exceptions
from solar_twilight.api.core.exceptions import (
    ConfigurationError,
    ConvergenceError,
    InvalidConfigurationError,
    LocationError,
    LocationNotSetError,
    SolverError,
    TimezoneNotFoundError,
    TwilightError,
)
from solar_twilight.api.core.types import TimePair, TwilightResult

# Location configuration
from solar_twilight.api.location.observer import (
    ObserverLocation,
    clear_observer_location,
    derive_location,
    get_observer_location,
    set_observer_location,
)


__version__ = "0.1.0"

__all__ = [
    "DIARY_ENTRIES",
    "ConfigurationError",
    "ConvergenceError",
    "Direction",
    "InvalidConfigurationError",
    "LocationError",
    "LocationNotSetError",
    "ObserverLocation",
    "SolverError",
    "TimePair",
    "TimezoneNotFoundError",
    "TwilightError",
    "TwilightKind",
    "TwilightResult",
    "astronomical_twilight",
    "civil_twilight",
    "clear_observer_location",
    "derive_location",
    "diary_entries",
    "diary_entry",
    "find_crossing",
    "format_clock_time",
    "format_day_length",
    "get_observer_location",
    "nautical_twilight",
    "set_observer_location",
    "solve_for_location",
    "sunrise_sunset",
    "sunrise_sunset_string",
    "twilight_for_kind",
    "twilight_for_threshold",
    "twilight_lines",
]
