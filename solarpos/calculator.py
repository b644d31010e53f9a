"""
solarpos.calculator - Memoising solar calculator for one site

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import math
import threading
from typing import Optional

from . import cache as cache_module
from .compute import SolarPosition, check_range, solar_position
from .exceptions import NoSunriseError, PolarDayError, PolarNightError

__all__ = ['SolarCalculator']


class SolarCalculator:
    """
    Solar event times and angles for a fixed site.

    The last computed instant and its results are kept, so repeated
    queries for the same instant do not recompute. Reconfiguring the
    site drops the kept results.

    Parameters
    ----------
    tz_offset : int
        Time zone offset from GMT in hours, negative west of Greenwich.
        For example, Pacific Standard Time is -8
    latitude : float
        Latitude of the site (degrees), north positive
    longitude : float
        Longitude of the site (degrees), west negative

    Notes
    -----
    Instants are seconds since 1970-01-01 read on the site's local clock,
    as kept by a real time clock set to local time. Returned event times
    are in that same local clock.

    Examples
    --------
    >>> calc = SolarCalculator(-8, 36.62, -121.904)  # Monterey, California
    >>> calc.sunrise(1592740800) < calc.sunset(1592740800)
    True
    """

    def __init__(self, tz_offset: int, latitude: float, longitude: float):
        self._lock = threading.Lock()
        self._cached: Optional[tuple[int, SolarPosition]] = None
        self._set_site(tz_offset, latitude, longitude)

    def configure(self, tz_offset: int, latitude: float, longitude: float) -> None:
        """
        Set the site, replacing any previous configuration

        Values are not validated. Latitudes beyond +/- 72 degrees are
        accepted with a RuntimeWarning.
        """
        self._set_site(tz_offset, latitude, longitude)

    def _set_site(self, tz_offset, latitude, longitude):
        # warning points at the caller of __init__ or configure
        check_range(latitude=latitude, stacklevel=3)
        with self._lock:
            self._tz_offset = tz_offset
            self._latitude = latitude
            self._longitude = longitude
            self._cached = None

    @property
    def tz_offset(self) -> int:
        return self._tz_offset

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __repr__(self):
        return (f"SolarCalculator(tz_offset={self._tz_offset}, "
                f"latitude={self._latitude}, longitude={self._longitude})")

    def clear_cache(self) -> None:
        """Drop the memoised result."""
        with self._lock:
            self._cached = None

    @property
    def last_timestamp(self) -> Optional[int]:
        """Instant of the memoised result, None before the first query"""
        cached = self._cached
        return None if cached is None else cached[0]

    def position(self, t: int) -> SolarPosition:
        """
        All solar quantities for instant `t`

        Parameters
        ----------
        t : int
            Seconds since 1970-01-01 on the local clock, non-negative.
            Floats are accepted only when they hold a whole number

        Returns
        -------
        SolarPosition
        """
        return self._position(t)

    def _position(self, t) -> SolarPosition:
        # Every public query calls this directly so range warnings
        # resolve to the same user frame
        if t < 0:
            raise ValueError(f"Timestamp must be non-negative, got {t}")
        if int(t) != t:
            raise ValueError(f"Timestamp must be a whole number of seconds, got {t}")
        t = int(t)

        with self._lock:
            cached = self._cached
            if (cached is not None and cached[0] == t
                    and cache_module.is_cache_enabled()):
                cache_module._state.record_hit()
                return cached[1]

            cache_module._state.record_miss()
            result = solar_position(t, self._tz_offset, self._latitude,
                                    self._longitude, stacklevel=4)
            self._cached = (t, result)
            return result

    def _event(self, pos: SolarPosition, t: int, name: str) -> int:
        value = getattr(pos, name)
        if math.isnan(value):
            if pos.polar == 'day':
                raise PolarDayError(t, self._latitude)
            if pos.polar == 'night':
                raise PolarNightError(t, self._latitude)
            raise NoSunriseError(t, self._latitude)
        return int(value)

    def solar_noon(self, t: int) -> int:
        """Solar noon of the day (local clock seconds since 1970-01-01)"""
        return self._event(self._position(t), t, 'solar_noon')

    def sunrise(self, t: int) -> int:
        """
        Sunrise of the day (local clock seconds since 1970-01-01)

        Raises
        ------
        PolarDayError, PolarNightError
            The sun does not cross the horizon on that day
        """
        return self._event(self._position(t), t, 'sunrise')

    def sunset(self, t: int) -> int:
        """
        Sunset of the day (local clock seconds since 1970-01-01)

        Raises
        ------
        PolarDayError, PolarNightError
            The sun does not cross the horizon on that day
        """
        return self._event(self._position(t), t, 'sunset')

    def day_length(self, t: int) -> float:
        """Sunlight duration in minutes"""
        return self._position(t).day_length

    def elevation(self, t: int) -> float:
        """Solar elevation corrected for atmospheric refraction (degrees)"""
        return self._position(t).elevation

    def azimuth(self, t: int) -> float:
        """Solar azimuth (degrees clockwise from north)"""
        return self._position(t).azimuth

    def zenith(self, t: int) -> float:
        """Solar zenith angle (degrees below straight up)"""
        return self._position(t).zenith
