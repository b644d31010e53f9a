"""
solarpos - Solar position and sunrise/sunset calculations

NOAA solar calculator algorithm for a fixed site: solar noon, sunrise,
sunset, day length, solar elevation and azimuth.
Results are accurate for the years 1901 to 2099 and for latitudes
between +/- 72 degrees.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    import numpy as np
    import solarpos

    # Monterey, California on Pacific Standard Time
    calc = solarpos.SolarCalculator(tz_offset=-8, latitude=36.62,
                                    longitude=-121.904)

    # Time as seconds since 1970-01-01 on the local clock
    t = 1592740800
    calc.sunrise(t), calc.solar_noon(t), calc.sunset(t)
    calc.elevation(t), calc.azimuth(t)

    # Batch computation (many instants, no memoisation)
    pos = solarpos.solar_position(t + 3600 * np.arange(24), -8, 36.62, -121.904)
"""

from . import astro
from . import cache
from . import compute
from .calculator import SolarCalculator
from .compute import (
    SolarPosition,
    solar_position,
    datetime_to_timestamp,
    check_range,
)
from .exceptions import (
    SolarCalculationError,
    NoSunriseError,
    PolarDayError,
    PolarNightError,
)
from .cache import (
    # Enable/disable
    enable_cache,
    disable_cache,
    is_cache_enabled,
    enable_range_warnings,
    disable_range_warnings,
    is_range_warnings_enabled,
    # Context managers
    cache_disabled,
    # Status
    get_cache_info,
    reset_cache_stats,
    show_cache_status,
)

__version__ = '0.1.0'
__all__ = [
    'astro',
    'cache',
    'compute',
    # Calculator
    'SolarCalculator',
    'SolarPosition',
    'solar_position',
    'datetime_to_timestamp',
    'check_range',
    # Errors
    'SolarCalculationError',
    'NoSunriseError',
    'PolarDayError',
    'PolarNightError',
    # Cache control
    'enable_cache',
    'disable_cache',
    'is_cache_enabled',
    'enable_range_warnings',
    'disable_range_warnings',
    'is_range_warnings_enabled',
    'cache_disabled',
    'get_cache_info',
    'reset_cache_stats',
    'show_cache_status',
]
