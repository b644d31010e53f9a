"""
solarpos.exceptions - Errors raised by solar calculations

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

__all__ = [
    'NoSunriseError',
    'PolarDayError',
    'PolarNightError',
    'SolarCalculationError',
]


class SolarCalculationError(ValueError):
    """Base class for solar calculation errors."""


class NoSunriseError(SolarCalculationError):
    """
    The sun does not cross the horizon on the requested day.

    Parameters
    ----------
    timestamp : int
        Requested instant (seconds since 1970-01-01)
    latitude : float
        Latitude of the site (degrees)
    """

    condition = 'no sunrise or sunset'

    def __init__(self, timestamp: int, latitude: float):
        self.timestamp = timestamp
        self.latitude = latitude
        super().__init__(
            f"{self.condition} at latitude {latitude} on the day of t={timestamp}"
        )


class PolarDayError(NoSunriseError):
    """The sun stays above the horizon all day."""

    condition = 'polar day'


class PolarNightError(NoSunriseError):
    """The sun stays below the horizon all day."""

    condition = 'polar night'
