"""
solarpos.compute - Solar event times and angles for a site

Pure functions: the same (t, tz_offset, latitude, longitude) always
gives the same SolarPosition. Memoisation lives in SolarCalculator.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import warnings
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Optional, Union

import numpy as np

from . import cache as cache_module
from .astro import ephemeris

__all__ = [
    'SolarPosition',
    'check_range',
    'datetime_to_timestamp',
    'solar_position',
]

# Documented accuracy range
MAX_LATITUDE = 72.0
_MIN_TIMESTAMP = -2177452800  # 1901-01-01T00:00:00
_MAX_TIMESTAMP = 4102444800   # 2100-01-01T00:00:00

ArrayLike = Union[int, float, np.ndarray]


@dataclass(frozen=True, eq=False)
class SolarPosition:
    """
    Solar quantities for one site and one instant (or array of instants)

    Event times are seconds since 1970-01-01 read on the site's local
    clock: the timezone offset is already included in the value.

    Attributes
    ----------
    timestamp : int or np.ndarray
        Input instant (seconds since 1970-01-01)
    solar_noon : float or np.ndarray
        Solar noon of the day (local clock seconds)
    sunrise : float or np.ndarray
        Sunrise of the day (local clock seconds), NaN during polar day/night
    sunset : float or np.ndarray
        Sunset of the day (local clock seconds), NaN during polar day/night
    day_length : float or np.ndarray
        Sunlight duration (minutes), 1440 during polar day, 0 during polar night
    elevation : float or np.ndarray
        Solar elevation corrected for atmospheric refraction (degrees)
    azimuth : float or np.ndarray
        Solar azimuth (degrees clockwise from north) in range [0, 360)
    zenith : float or np.ndarray
        Solar zenith angle (degrees)
    declination : float or np.ndarray
        Sun declination (degrees)
    equation_of_time : float or np.ndarray
        Equation of time (minutes)
    hour_angle_sunrise : float or np.ndarray
        Hour angle at sunrise (degrees), NaN during polar day/night
    true_solar_time : float or np.ndarray
        True solar time (minutes) in range [0, 1440)
    hour_angle : float or np.ndarray
        Hour angle of the sun (degrees)
    polar : str, None or np.ndarray
        'day' or 'night' when the sun does not cross the horizon,
        None otherwise
    """
    timestamp: ArrayLike
    solar_noon: ArrayLike
    sunrise: ArrayLike
    sunset: ArrayLike
    day_length: ArrayLike
    elevation: ArrayLike
    azimuth: ArrayLike
    zenith: ArrayLike
    declination: ArrayLike
    equation_of_time: ArrayLike
    hour_angle_sunrise: ArrayLike
    true_solar_time: ArrayLike
    hour_angle: ArrayLike
    polar: Optional[Union[str, np.ndarray]] = None

    def __eq__(self, other):
        """Field-wise comparison, NaN equal to NaN, arrays compared whole"""
        if not isinstance(other, SolarPosition):
            return NotImplemented
        for f in fields(self):
            a = getattr(self, f.name)
            b = getattr(other, f.name)
            if f.name == 'polar':
                # object arrays of str and None
                if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
                    if not np.array_equal(a, b):
                        return False
                elif a != b:
                    return False
            elif not np.array_equal(a, b, equal_nan=True):
                return False
        return True

    __hash__ = None

    @property
    def has_sunrise(self):
        """True where the sun rises and sets on the requested day"""
        if isinstance(self.polar, np.ndarray):
            flags = [p is None for p in self.polar.ravel()]
            return np.array(flags, dtype=bool).reshape(self.polar.shape)
        return self.polar is None


def datetime_to_timestamp(dt: datetime) -> int:
    """Convert datetime to seconds since 1970-01-01 (naive means UTC)"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def check_range(timestamp: Optional[ArrayLike] = None,
                latitude: Optional[float] = None,
                stacklevel: int = 1) -> None:
    """
    Warn about inputs outside the documented accuracy range

    The NOAA formulae hold for the years 1901 to 2099 and for
    latitudes within +/- 72 degrees. Inputs beyond that are still
    computed.

    Parameters
    ----------
    timestamp : int or np.ndarray, optional
        Instant(s) in seconds since 1970-01-01
    latitude : float, optional
        Latitude of the site (degrees)
    stacklevel : int, default 1
        Frames above the caller of check_range to attribute the
        warning to (1 is the direct caller)
    """
    if not cache_module.is_range_warnings_enabled():
        return

    if latitude is not None and abs(latitude) > MAX_LATITUDE:
        warnings.warn(
            f"solarpos: latitude {latitude} is outside +/-{MAX_LATITUDE} degrees. "
            "Results may be inaccurate and sunrise/sunset may not exist.",
            RuntimeWarning,
            stacklevel=stacklevel + 1
        )

    if timestamp is not None:
        t = np.asarray(timestamp)
        if np.any(t < _MIN_TIMESTAMP) or np.any(t >= _MAX_TIMESTAMP):
            warnings.warn(
                "solarpos: timestamp outside the years 1901-2099. "
                "Results may be inaccurate.",
                RuntimeWarning,
                stacklevel=stacklevel + 1
            )


def _scalar(x):
    """Unwrap 0-d arrays into Python scalars"""
    if isinstance(x, np.ndarray) and x.ndim == 0:
        return x.item()
    return x


def solar_position(
    t: ArrayLike,
    tz_offset: int,
    latitude: float,
    longitude: float,
    stacklevel: int = 2,
) -> SolarPosition:
    """
    Compute solar event times and angles (NOAA solar calculator)

    Parameters
    ----------
    t : int or np.ndarray
        Instant(s) in seconds since 1970-01-01, read on the local clock
        of the site
    tz_offset : int
        Time zone offset from GMT in hours, negative west of Greenwich
    latitude : float
        Latitude of the site (degrees), north positive
    longitude : float
        Longitude of the site (degrees), west negative
    stacklevel : int, default 2
        Frame range warnings are attributed to (2 is the caller)

    Returns
    -------
    SolarPosition
        Scalars for scalar `t`, arrays for array `t`

    Examples
    --------
    >>> pos = solar_position(1592740800, -8, 36.62, -121.904)
    >>> pos.sunrise < pos.solar_noon < pos.sunset
    True
    """
    check_range(timestamp=t, stacklevel=stacklevel)

    t_arr = np.asarray(t, dtype=np.int64)
    unix_days, frac_day = ephemeris.split_timestamp(t_arr)
    offset_day = tz_offset / 24.0

    # Julian day in GMT and Julian centuries since J2000.0
    jd = ephemeris.julian_day(unix_days, frac_day, tz_offset)
    T = ephemeris.julian_centuries(jd)

    # Solar orbital elements
    L0 = ephemeris.mean_longitude(T)
    M = ephemeris.mean_anomaly(T)
    e = ephemeris.eccentricity(T)
    C = ephemeris.equation_of_center(T, M)
    apparent_lon = ephemeris.apparent_longitude(T, L0 + C)
    obliquity = ephemeris.obliquity_correction(T, ephemeris.mean_obliquity(T))
    delta = ephemeris.declination(obliquity, apparent_lon)
    eot = ephemeris.equation_of_time(L0, M, e, obliquity)

    # Hour angle at sunrise, NaN when the sun does not cross the horizon
    cos_has = ephemeris.sunrise_hour_angle_cosine(latitude, delta)
    has = ephemeris.sunrise_hour_angle(latitude, delta)
    polar_day = cos_has < -1.0
    polar_night = cos_has > 1.0

    # Solar noon as fraction of the GMT day, then local clock seconds
    noon_frac = (720.0 - 4.0 * longitude - eot) / 1440.0
    day_start = unix_days + offset_day
    solar_noon = (day_start + noon_frac) * 86400.0
    sunrise = (day_start + noon_frac - has * 4.0 / 1440.0) * 86400.0
    sunset = (day_start + noon_frac + has * 4.0 / 1440.0) * 86400.0

    day_length = np.where(polar_day, 1440.0, np.where(polar_night, 0.0, 8.0 * has))

    # Position of the sun at the requested instant
    tst = ephemeris.true_solar_time(frac_day, eot, longitude, tz_offset)
    omega = ephemeris.hour_angle(tst)
    zenith = ephemeris.zenith_angle(latitude, delta, omega)
    elevation = 90.0 - zenith + ephemeris.REFRACTION_CORRECTION
    azimuth = ephemeris.azimuth_angle(latitude, delta, omega, zenith)

    polar = np.where(polar_day, 'day', np.where(polar_night, 'night', None))
    polar = polar.astype(object)
    if polar.ndim == 0:
        polar = polar.item()

    return SolarPosition(
        timestamp=_scalar(t_arr),
        solar_noon=_scalar(solar_noon),
        sunrise=_scalar(sunrise),
        sunset=_scalar(sunset),
        day_length=_scalar(day_length),
        elevation=_scalar(elevation),
        azimuth=_scalar(azimuth),
        zenith=_scalar(zenith),
        declination=_scalar(delta),
        equation_of_time=_scalar(eot),
        hour_angle_sunrise=_scalar(has),
        true_solar_time=_scalar(tst),
        hour_angle=_scalar(omega),
        polar=polar,
    )
