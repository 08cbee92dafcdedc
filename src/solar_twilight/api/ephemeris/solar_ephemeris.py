"""
Solar Ephemeris

Position of the Sun computed with Astropy: apparent coordinates from the
built-in ERFA ephemeris, altitude from the AltAz frame and sidereal time
from ``Time.sidereal_time``.

Times are expressed as a TimePair: Julian centuries to 0h UT of a day plus
the UT hour, so every instant of a search shares the same day epoch.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

import astropy.units as u
import deal
from astropy.coordinates import TETE, AltAz, Angle, EarthLocation, get_body
from astropy.time import Time

from ..core.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_HOUR_ANGLE,
    HOURS_PER_DAY,
    JULIAN_DATE_J2000,
    MINUTES_PER_HOUR,
)
from ..core.types import EquatorialCoordinates, TimePair
from ..core.utils import configure_astropy_iers, date_to_julian_centuries


logger = logging.getLogger(__name__)

__all__ = [
    "equation_of_time",
    "exact_local_noon",
    "julian_centuries",
    "sidereal_time_at_midnight",
    "solar_altitude",
    "solar_equatorial_coordinates",
]

# Bundled IERS tables only; no downloads during a search
configure_astropy_iers()


def _epoch_time(century: float, ut_hour: float = 0.0) -> Time:
    """Astropy Time for a century offset plus hours, kept as a two-part JD."""
    return Time(
        JULIAN_DATE_J2000 + century * DAYS_PER_JULIAN_CENTURY,
        ut_hour / HOURS_PER_DAY,
        format="jd",
        scale="utc",
    )


def _to_time(time_pair: TimePair) -> Time:
    return _epoch_time(time_pair.century, time_pair.ut_hour)


def _apparent_sun(t: Time):
    """Sun in the true equator, true equinox of date frame."""
    return get_body("sun", t).transform_to(TETE(obstime=t))


def julian_centuries(day: date) -> float:
    """Julian centuries from J2000.0 to 0h UT of ``day``."""
    return date_to_julian_centuries(day)


def sidereal_time_at_midnight(century: float) -> float:
    """
    Greenwich mean sidereal time at 0h UT.

    Args:
        century: Julian centuries from J2000.0 to 0h UT of the day

    Returns:
        Sidereal time in hours (0-24)
    """
    lst = _epoch_time(century).sidereal_time("mean", longitude=0 * u.deg)
    return float(lst.hour)


def solar_equatorial_coordinates(time_pair: TimePair) -> EquatorialCoordinates:
    """
    Apparent right ascension and declination of the Sun.

    Args:
        time_pair: Instant to evaluate

    Returns:
        EquatorialCoordinates in degrees, referred to the true equator and equinox of date
    """
    sun = _apparent_sun(_to_time(time_pair))
    return EquatorialCoordinates(ra_degrees=float(sun.ra.degree), dec_degrees=float(sun.dec.degree))


def equation_of_time(century: float) -> float:
    """
    Apparent minus mean solar time.

    The Sun's Greenwich hour angle (apparent sidereal time minus apparent
    right ascension) is compared with the hour angle of the mean Sun.

    Args:
        century: Julian centuries from J2000.0

    Returns:
        Equation of time in minutes (positive when the sundial is fast)
    """
    t = _epoch_time(century)
    ut_hour = ((t.jd1 - 0.5) % 1.0 + t.jd2) * HOURS_PER_DAY
    hour_angle = t.sidereal_time("apparent", longitude=0 * u.deg) - _apparent_sun(t).ra
    mean_hour_angle = Angle((ut_hour - 12.0) * DEGREES_PER_HOUR_ANGLE, unit=u.deg)
    eot = (hour_angle - mean_hour_angle).wrap_at(180 * u.deg)
    return float(eot.hour) * MINUTES_PER_HOUR


@deal.pre(lambda time_pair, latitude, longitude: -90 <= latitude <= 90, message="Latitude must be -90 to +90")
@deal.pre(lambda time_pair, latitude, longitude: -180 <= longitude <= 180, message="Longitude must be -180 to +180")
def solar_altitude(time_pair: TimePair, latitude: float, longitude: float) -> float:
    """
    Altitude of the Sun's center, without refraction.

    Args:
        time_pair: Instant to evaluate
        latitude: Observer latitude in degrees (north positive)
        longitude: Observer longitude in degrees (east positive)

    Returns:
        Altitude in degrees (negative below the horizon)
    """
    t = _to_time(time_pair)
    location = EarthLocation(lat=latitude * u.deg, lon=longitude * u.deg)
    altaz = get_body("sun", t).transform_to(AltAz(obstime=t, location=location))
    return float(altaz.alt.degree)


@deal.pre(lambda day, longitude: -180 <= longitude <= 180, message="Longitude must be -180 to +180")
def exact_local_noon(day: date, longitude: float) -> TimePair:
    """
    UT of local apparent solar noon on ``day``.

    Local noon is corrected by the equation of time. When it falls before 0h
    or after 24h UT the returned pair refers to the neighbouring UT day.

    Args:
        day: Calendar date
        longitude: Observer longitude in degrees (east positive)

    Returns:
        TimePair at solar noon
    """
    century = julian_centuries(day)
    mean_noon = 12.0 - longitude / DEGREES_PER_HOUR_ANGLE
    ut = mean_noon
    for _ in range(2):
        t = century + ut / (HOURS_PER_DAY * DAYS_PER_JULIAN_CENTURY)
        ut = mean_noon - equation_of_time(t) / MINUTES_PER_HOUR

    noon_day = day
    if ut < 0:
        noon_day = day - timedelta(days=1)
        ut += HOURS_PER_DAY
    elif ut >= HOURS_PER_DAY:
        noon_day = day + timedelta(days=1)
        ut -= HOURS_PER_DAY

    if noon_day != day:
        century = julian_centuries(noon_day)
        logger.debug(f"Local noon of {day} falls on UT date {noon_day}")

    return TimePair(century=century, ut_hour=ut, date=noon_day)
