"""
Twilight Calculations

Times at which the Sun's center crosses a given altitude: sunrise/sunset,
civil, nautical and astronomical twilight. One bisection solver serves every
threshold; the phenomena differ only in the altitude passed in.
"""

from __future__ import annotations

import logging
import math
from datetime import date

import deal

from ..core.constants import (
    DEFAULT_SOLAR_ERROR,
    HOURS_PER_DAY,
    MAX_BISECTION_ITERATIONS,
    MINUTES_PER_HOUR,
    REFERENCE_LATITUDE,
    SEARCH_WINDOW_HOURS,
    SUNRISE_ALTITUDE,
)
from ..core.enums import Direction, TwilightKind
from ..core.exceptions import ConvergenceError
from ..core.types import TimePair, TwilightResult
from ..ephemeris.solar_ephemeris import exact_local_noon, solar_altitude
from ..location.observer import ObserverLocation, require_observer_location, resolve_utc_offset_minutes


logger = logging.getLogger(__name__)

__all__ = [
    "astronomical_twilight",
    "civil_twilight",
    "find_crossing",
    "nautical_twilight",
    "northern_spring_or_summer",
    "solve_for_location",
    "sunrise_sunset",
    "twilight_for_kind",
    "twilight_for_threshold",
]


@deal.pre(
    lambda direction, latitude, longitude, midday_time, threshold, solar_error=DEFAULT_SOLAR_ERROR: solar_error > 0,
    message="Convergence tolerance must be positive",
)
def find_crossing(
    direction: Direction,
    latitude: float,
    longitude: float,
    midday_time: TimePair,
    threshold: float,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> float | None:
    """
    UT hour at which the Sun's altitude equals ``threshold`` on one side of noon.

    The search window runs from local solar noon to 12 hours before it
    (morning) or after it (evening). The crossing must be bracketed: the Sun
    must not be above the threshold at the far end, nor below it at noon.
    An exact tie at either end still counts as bracketed.

    Args:
        direction: Morning or evening crossing
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        midday_time: Local solar noon
        threshold: Solar altitude in degrees
        solar_error: Convergence tolerance in minutes of time

    Returns:
        UT hour relative to ``midday_time.date``, or None if the Sun never
        crosses the threshold in the window

    Raises:
        ConvergenceError: If bisection does not settle within the iteration cap
    """
    ut = midday_time.ut_hour
    utmin = ut + direction.sign * SEARCH_WINDOW_HOURS  # far from noon
    utmax = ut  # noon

    if (
        solar_altitude(midday_time.at(utmin), latitude, longitude) > threshold
        or solar_altitude(midday_time.at(utmax), latitude, longitude) < threshold
    ):
        logger.debug(f"No {direction} crossing of {threshold}° at latitude {latitude:.4f}")
        return None

    tolerance = solar_error / MINUTES_PER_HOUR
    moment_old = -math.inf
    moment = math.inf
    iterations = 0
    while abs(moment - moment_old) > tolerance:
        if iterations >= MAX_BISECTION_ITERATIONS:
            raise ConvergenceError(
                f"Bisection for {threshold}° ({direction}) did not converge after {iterations} iterations"
            )
        iterations += 1

        midpoint = (utmin + utmax) / 2.0
        altitude = solar_altitude(midday_time.at(midpoint), latitude, longitude)
        if altitude < threshold:
            utmin = midpoint
        if altitude > threshold:
            utmax = midpoint
        moment_old, moment = moment, midpoint

    logger.debug(f"{direction} crossing of {threshold}° at {moment:.5f}h UT after {iterations} iterations")
    return moment


def _day_length(morning: float | None, evening: float | None) -> float | None:
    if morning is None or evening is None:
        return None
    return evening - morning


def northern_spring_or_summer(midday_time: TimePair, longitude: float, threshold: float) -> bool:
    """
    Whether the Sun stands north of the equator on this date.

    The day at the reference latitude (+10°) is compared with its mirror at
    -10°, both measured between crossings of ``threshold``. Used to tell
    continuous day from continuous night when the Sun never crosses.

    Args:
        midday_time: Local solar noon
        longitude: Observer longitude in degrees
        threshold: Solar altitude in degrees

    Returns:
        True during northern spring and summer
    """
    north = _day_length(
        find_crossing(Direction.MORNING, REFERENCE_LATITUDE, longitude, midday_time, threshold),
        find_crossing(Direction.EVENING, REFERENCE_LATITUDE, longitude, midday_time, threshold),
    )
    south = _day_length(
        find_crossing(Direction.MORNING, -REFERENCE_LATITUDE, longitude, midday_time, threshold),
        find_crossing(Direction.EVENING, -REFERENCE_LATITUDE, longitude, midday_time, threshold),
    )

    if north is None or south is None:
        # Threshold never reached near the equator; the noon Sun still tells the season
        logger.warning(f"Reference crossings of {threshold}° missing, comparing noon altitudes")
        return solar_altitude(midday_time, REFERENCE_LATITUDE, longitude) > solar_altitude(
            midday_time, -REFERENCE_LATITUDE, longitude
        )

    season = north > south
    logger.debug(f"Northern spring/summer: {season} (reference day {north:.3f}h vs {south:.3f}h)")
    return season


def _to_local(ut_hour: float | None, midday_time: TimePair, day: date, utc_offset_minutes: int) -> float | None:
    """Shift a UT crossing to local clock hours of ``day``; None if it lands on another date."""
    if ut_hour is None:
        return None
    local = ut_hour + utc_offset_minutes / MINUTES_PER_HOUR + (midday_time.date - day).days * HOURS_PER_DAY
    if 0.0 <= local < HOURS_PER_DAY:
        return local
    logger.debug(f"Crossing at {local:.4f}h local falls outside {day}")
    return None


@deal.pre(
    lambda day, latitude, longitude, threshold, utc_offset_minutes=0, solar_error=DEFAULT_SOLAR_ERROR: (
        -90 <= latitude <= 90
    ),
    message="Latitude must be -90 to +90",
)
@deal.pre(
    lambda day, latitude, longitude, threshold, utc_offset_minutes=0, solar_error=DEFAULT_SOLAR_ERROR: (
        -180 <= longitude <= 180
    ),
    message="Longitude must be -180 to +180",
)
@deal.pre(
    lambda day, latitude, longitude, threshold, utc_offset_minutes=0, solar_error=DEFAULT_SOLAR_ERROR: (
        solar_error > 0
    ),
    message="Convergence tolerance must be positive",
)
def twilight_for_threshold(
    day: date,
    latitude: float,
    longitude: float,
    threshold: float,
    utc_offset_minutes: int = 0,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """
    Morning and evening crossings of ``threshold`` on a local calendar date.

    When either crossing is missing the day length is forced to 24 hours
    (continuous day) or 0 (continuous night): 24 in the northern hemisphere
    during northern spring/summer and in the southern hemisphere otherwise.

    Args:
        day: Local calendar date
        latitude: Observer latitude in degrees (north positive)
        longitude: Observer longitude in degrees (east positive)
        threshold: Solar altitude in degrees
        utc_offset_minutes: Local clock offset from UTC in minutes
        solar_error: Convergence tolerance in minutes of time

    Returns:
        TwilightResult with local clock hours
    """
    midday_time = exact_local_noon(day, longitude)
    season = northern_spring_or_summer(midday_time, longitude, threshold)

    morning = find_crossing(Direction.MORNING, latitude, longitude, midday_time, threshold, solar_error)
    evening = find_crossing(Direction.EVENING, latitude, longitude, midday_time, threshold, solar_error)

    if morning is None or evening is None:
        if (latitude > 0 and season) or (latitude < 0 and not season):
            day_length = 24.0
        else:
            day_length = 0.0
    else:
        day_length = evening - morning

    return TwilightResult(
        morning=_to_local(morning, midday_time, day, utc_offset_minutes),
        evening=_to_local(evening, midday_time, day, utc_offset_minutes),
        day_length=day_length,
        threshold=threshold,
        date=day,
    )


def sunrise_sunset(
    day: date,
    latitude: float,
    longitude: float,
    utc_offset_minutes: int = 0,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """Sunrise, sunset and day length (Sun's center at -0.61°)."""
    return twilight_for_threshold(day, latitude, longitude, SUNRISE_ALTITUDE, utc_offset_minutes, solar_error)


def twilight_for_kind(
    kind: TwilightKind,
    day: date,
    latitude: float,
    longitude: float,
    utc_offset_minutes: int = 0,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """Crossings for one of the standard phenomena."""
    return twilight_for_threshold(day, latitude, longitude, kind.threshold, utc_offset_minutes, solar_error)


def civil_twilight(
    day: date,
    latitude: float,
    longitude: float,
    utc_offset_minutes: int = 0,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """Start of morning and end of evening civil twilight (-6°)."""
    return twilight_for_kind(TwilightKind.CIVIL, day, latitude, longitude, utc_offset_minutes, solar_error)


def nautical_twilight(
    day: date,
    latitude: float,
    longitude: float,
    utc_offset_minutes: int = 0,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """Start of morning and end of evening nautical twilight (-12°)."""
    return twilight_for_kind(TwilightKind.NAUTICAL, day, latitude, longitude, utc_offset_minutes, solar_error)


def astronomical_twilight(
    day: date,
    latitude: float,
    longitude: float,
    utc_offset_minutes: int = 0,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """Start of morning and end of evening astronomical twilight (-18°)."""
    return twilight_for_kind(TwilightKind.ASTRONOMICAL, day, latitude, longitude, utc_offset_minutes, solar_error)


def solve_for_location(
    day: date,
    kind: TwilightKind | float,
    location: ObserverLocation | None = None,
    solar_error: float = DEFAULT_SOLAR_ERROR,
) -> TwilightResult:
    """
    Solve for the configured (or given) observer location.

    The UTC offset is resolved for ``day``, so daylight saving applies when
    the location carries a time zone.

    Args:
        day: Local calendar date
        kind: Standard phenomenon or a raw altitude threshold in degrees
        location: Observer location (default: the configured one)
        solar_error: Convergence tolerance in minutes of time

    Returns:
        TwilightResult with local clock hours

    Raises:
        LocationNotSetError: If no complete location is available
    """
    observer = require_observer_location(location)
    threshold = kind.threshold if isinstance(kind, TwilightKind) else float(kind)
    offset = resolve_utc_offset_minutes(observer, day)
    return twilight_for_threshold(day, observer.latitude, observer.longitude, threshold, offset, solar_error)
