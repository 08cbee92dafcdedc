"""
Custom exception classes for solar twilight calculations.

This module defines specific exceptions for different types of errors
that can occur while solving for sunrise, sunset and twilight times.
A Sun that never reaches a threshold is not an error; it is reported
as a missing instant in the result.
"""

from __future__ import annotations


__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    # Solver exceptions
    "ConvergenceError",
    "InvalidConfigurationError",
    # Location/Observer exceptions
    "LocationError",
    "LocationNotSetError",
    "SolverError",
    "TimezoneNotFoundError",
    # Base exception
    "TwilightError",
]


class TwilightError(Exception):
    """
    Base exception for all solar-twilight errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all twilight-related errors.
    """

    pass


# ============================================================================
# Location/Observer Exceptions
# ============================================================================


class LocationError(TwilightError):
    """Base exception for location-related errors."""

    pass


class LocationNotSetError(LocationError):
    """
    Raised when a solve is requested before the observer location is configured.

    Latitude, longitude and UTC offset must all be known. Callers are expected
    to run a setup step (``set_observer_location`` or ``derive_location``)
    before solving.
    """

    pass


class TimezoneNotFoundError(LocationError):
    """Raised when no time zone can be determined for a set of coordinates."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(TwilightError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid (bad tolerance, malformed config file)."""

    pass


# ============================================================================
# Solver Exceptions
# ============================================================================


class SolverError(TwilightError):
    """Base exception for internal failures of the crossing solver."""

    pass


class ConvergenceError(SolverError):
    """
    Raised when bisection fails to converge within the iteration cap.

    This signals an internal error and is distinct from the Sun never
    crossing the threshold, which yields a missing instant instead.
    """

    pass
