"""Solar ephemeris adapter."""

from solar_twilight.api.ephemeris.solar_ephemeris import (
    equation_of_time,
    exact_local_noon,
    julian_centuries,
    sidereal_time_at_midnight,
    solar_altitude,
    solar_equatorial_coordinates,
)


__all__ = [
    "equation_of_time",
    "exact_local_noon",
    "julian_centuries",
    "sidereal_time_at_midnight",
    "solar_altitude",
    "solar_equatorial_coordinates",
]
