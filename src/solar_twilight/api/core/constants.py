"""
Physical and Astronomical Constants

Constants used throughout the solar-twilight API for calculations.
"""

from typing import Final


__all__ = [
    "ASTRONOMICAL_TWILIGHT_ALTITUDE",
    "CIVIL_TWILIGHT_ALTITUDE",
    "DAYS_PER_JULIAN_CENTURY",
    "DEFAULT_SOLAR_ERROR",
    "DEGREES_PER_HOUR_ANGLE",
    "HOURS_PER_DAY",
    "JULIAN_DATE_J2000",
    "MAX_BISECTION_ITERATIONS",
    "MINUTES_PER_HOUR",
    "NAUTICAL_TWILIGHT_ALTITUDE",
    "REFERENCE_LATITUDE",
    "SEARCH_WINDOW_HOURS",
    "SUNRISE_ALTITUDE",
]


# Time conversion factors
HOURS_PER_DAY: Final[float] = 24.0
"""Hours in a civil day."""

MINUTES_PER_HOUR: Final[float] = 60.0
"""Minutes in an hour."""

# Astronomical constants
JULIAN_DATE_J2000: Final[float] = 2451545.0
"""Julian Date of the J2000.0 epoch (2000-01-01 12:00 UT)."""

DAYS_PER_JULIAN_CENTURY: Final[float] = 36525.0
"""Days in a Julian century."""

DEGREES_PER_HOUR_ANGLE: Final[float] = 15.0
"""Degrees of sky rotation per hour of Right Ascension."""

# Solar altitude thresholds (degrees, Sun's center)
SUNRISE_ALTITUDE: Final[float] = -0.61
"""Altitude of the Sun's center at sunrise and sunset."""

CIVIL_TWILIGHT_ALTITUDE: Final[float] = -6.0
"""Altitude marking the start of morning / end of evening civil twilight."""

NAUTICAL_TWILIGHT_ALTITUDE: Final[float] = -12.0
"""Altitude marking the start of morning / end of evening nautical twilight."""

ASTRONOMICAL_TWILIGHT_ALTITUDE: Final[float] = -18.0
"""Altitude marking the start of morning / end of evening astronomical twilight."""

# Solver configuration
DEFAULT_SOLAR_ERROR: Final[float] = 0.5
"""Default convergence tolerance of the bisection solver, in minutes of time."""

SEARCH_WINDOW_HOURS: Final[float] = 12.0
"""Hours searched on each side of local solar noon."""

REFERENCE_LATITUDE: Final[float] = 10.0
"""Latitude used to decide whether the northern hemisphere is in spring/summer."""

MAX_BISECTION_ITERATIONS: Final[int] = 64
"""Upper bound on bisection steps before the solver gives up."""
