"""
Solver Settings

Runtime configuration read from the environment. The CLI loads a ``.env``
file with python-dotenv before these are consulted.
"""

from __future__ import annotations

import logging
import os

from .constants import DEFAULT_SOLAR_ERROR
from .exceptions import InvalidConfigurationError


logger = logging.getLogger(__name__)

__all__ = [
    "SOLAR_ERROR_ENV_VAR",
    "get_solar_error",
]

SOLAR_ERROR_ENV_VAR = "TWILIGHT_SOLAR_ERROR"


def get_solar_error(override: float | None = None) -> float:
    """
    Convergence tolerance of the solver in minutes of time.

    Precedence: explicit override, then ``TWILIGHT_SOLAR_ERROR``, then the
    built-in default of 0.5 minutes.

    Raises:
        InvalidConfigurationError: If the value is not a positive number
    """
    if override is not None:
        value = override
    else:
        raw = os.environ.get(SOLAR_ERROR_ENV_VAR)
        if raw is None or not raw.strip():
            return DEFAULT_SOLAR_ERROR
        try:
            value = float(raw)
        except ValueError as e:
            raise InvalidConfigurationError(f"{SOLAR_ERROR_ENV_VAR} must be a number, got {raw!r}") from e
        logger.debug(f"Using solar error {value} min from {SOLAR_ERROR_ENV_VAR}")

    if not value > 0:
        raise InvalidConfigurationError(f"Convergence tolerance must be positive, got {value}")
    return value
