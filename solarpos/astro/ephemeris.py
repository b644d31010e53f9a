"""
Solar ephemeris building blocks

NOAA solar calculator formulae, evaluated with NumPy so that every
function accepts either scalars or arrays.
Reference: https://gml.noaa.gov/grad/solcalc/calcdetails.html

Results are accurate for the years 1901 to 2099 and for latitudes
between +/- 72 degrees.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""


import numpy as np

# Constants
_JD_UNIX_EPOCH = 2440587.5  # JD of 1970-01-01T00:00:00
_JD_J2000 = 2451545.0  # JD of J2000.0
_JULIAN_CENTURY = 36525.0  # Julian century (days)
_DAY_SECONDS = 86400  # Seconds per day
_DAY_MINUTES = 1440.0  # Minutes per day
_DEG_TO_RAD = np.pi / 180.0  # Degrees to radians
_RAD_TO_DEG = 180.0 / np.pi  # Radians to degrees

# Zenith of the sun at sunrise/sunset: solar disk radius plus
# standard atmospheric refraction at the horizon (degrees)
SUNRISE_ZENITH = 90.833

# Fixed refraction correction applied to the elevation (degrees)
REFRACTION_CORRECTION = 0.1

# Polynomial coefficients in Julian centuries [c0, c1, c2, ...]
_GMLS_COEF = np.array([280.46646, 36000.76983, 0.0003032])
_GMAS_COEF = np.array([357.52911, 35999.05029, -0.0001537])
_EEO_COEF = np.array([0.016708634, -0.000042037, -0.0000001267])
_SEC1_COEF = np.array([1.914602, -0.004817, -0.000014])
_SEC2_COEF = np.array([0.019993, -0.000101])
# Mean obliquity arcseconds past 23 deg 26'
_MOE_COEF = np.array([21.448, -46.815, -0.00059, 0.001813])


def polynomial_sum(coefficients: np.ndarray, t: np.ndarray) -> np.ndarray:
    """
    Compute polynomial sum using Horner's method

    Parameters
    ----------
    coefficients : np.ndarray
        Coefficient array [c0, c1, c2, ...]
    t : np.ndarray
        Time variable

    Returns
    -------
    np.ndarray
        c0 + c1*t + c2*t^2 + ...
    """
    result = np.zeros_like(np.asarray(t, dtype=np.float64))
    for c in reversed(coefficients):
        result = result * t + c
    return result


def floor_mod(x: np.ndarray, m: float) -> np.ndarray:
    """
    Floored modulo: x - m*floor(x/m)

    Unlike a truncating remainder the result always carries the sign
    of `m`, so a positive divisor never yields a negative value.

    Parameters
    ----------
    x : float or np.ndarray
        Dividend
    m : float
        Divisor

    Returns
    -------
    np.ndarray
        Remainder in range [0, m) for positive m
    """
    x = np.asarray(x, dtype=np.float64)
    r = x - m * np.floor(x / m)
    # x/m rounding up to an integer can leave r == m
    return np.where(r >= m, r - m, r)


def normalize_angle(theta: np.ndarray, circle: float = 360.0) -> np.ndarray:
    """
    Normalize an angle to a single rotation

    Parameters
    ----------
    theta : float or np.ndarray
        Angle to normalize
    circle : float, default 360.0
        Circle of the angle (360.0 for degrees, 2*pi for radians)

    Returns
    -------
    np.ndarray
        Normalized angle in range [0, circle)
    """
    return floor_mod(theta, circle)


# ============================================================
# Time conversion
# ============================================================

def split_timestamp(t: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Split Unix time into whole days and fraction of the civil day

    Parameters
    ----------
    t : int or np.ndarray
        Seconds since 1970-01-01T00:00:00

    Returns
    -------
    unix_days : np.ndarray
        Whole days since the Unix epoch
    frac_day : np.ndarray
        Time past midnight as a fraction of a day (noon is 0.5)
    """
    unix_days, seconds = np.divmod(np.asarray(t, dtype=np.int64), _DAY_SECONDS)
    hours, seconds = np.divmod(seconds, 3600)
    minutes, seconds = np.divmod(seconds, 60)
    frac_day = ((seconds / 60.0 + minutes) / 60.0 + hours) / 24.0
    return unix_days, frac_day


def julian_day(unix_days: np.ndarray, frac_day: np.ndarray,
               tz_offset: float = 0.0) -> np.ndarray:
    """
    Compute the Julian Day Number in GMT

    Parameters
    ----------
    unix_days : np.ndarray
        Whole days since the Unix epoch
    frac_day : np.ndarray
        Fraction of the day
    tz_offset : float, default 0.0
        Hours east of GMT of the clock that `unix_days` and `frac_day`
        were read from

    Returns
    -------
    np.ndarray
        Julian Day Number
    """
    return _JD_UNIX_EPOCH + unix_days + frac_day - tz_offset / 24.0


def julian_centuries(jd: np.ndarray) -> np.ndarray:
    """Julian centuries since J2000.0"""
    return (jd - _JD_J2000) / _JULIAN_CENTURY


# ============================================================
# Solar orbital elements (degrees unless stated otherwise)
# ============================================================

def mean_longitude(T: np.ndarray) -> np.ndarray:
    """Geometric mean longitude of the sun, normalized to [0, 360)"""
    return normalize_angle(polynomial_sum(_GMLS_COEF, T))


def mean_anomaly(T: np.ndarray) -> np.ndarray:
    """Geometric mean anomaly of the sun"""
    return polynomial_sum(_GMAS_COEF, T)


def eccentricity(T: np.ndarray) -> np.ndarray:
    """Eccentricity of the Earth's orbit (unitless)"""
    return polynomial_sum(_EEO_COEF, T)


def equation_of_center(T: np.ndarray, M: np.ndarray) -> np.ndarray:
    """
    Sun equation of center

    Parameters
    ----------
    T : np.ndarray
        Julian centuries since J2000.0
    M : np.ndarray
        Geometric mean anomaly of the sun (degrees)

    Returns
    -------
    np.ndarray
        Equation of center (degrees)
    """
    M_rad = M * _DEG_TO_RAD
    return (np.sin(M_rad) * polynomial_sum(_SEC1_COEF, T)
            + np.sin(2.0 * M_rad) * polynomial_sum(_SEC2_COEF, T)
            + np.sin(3.0 * M_rad) * 0.000289)


def _omega(T: np.ndarray) -> np.ndarray:
    """Longitude of the ascending lunar node (radians)"""
    return (125.04 - 1934.136 * T) * _DEG_TO_RAD


def apparent_longitude(T: np.ndarray, true_longitude: np.ndarray) -> np.ndarray:
    """Sun apparent longitude, corrected for nutation and aberration"""
    return true_longitude - 0.00569 - 0.00478 * np.sin(_omega(T))


def mean_obliquity(T: np.ndarray) -> np.ndarray:
    """Mean obliquity of the ecliptic"""
    return 23.0 + (26.0 + polynomial_sum(_MOE_COEF, T) / 60.0) / 60.0


def obliquity_correction(T: np.ndarray, epsilon_0: np.ndarray) -> np.ndarray:
    """Obliquity of the ecliptic corrected for nutation"""
    return epsilon_0 + 0.00256 * np.cos(_omega(T))


def declination(obliquity: np.ndarray, apparent_lon: np.ndarray) -> np.ndarray:
    """Sun declination (degrees)"""
    return np.arcsin(np.sin(obliquity * _DEG_TO_RAD)
                     * np.sin(apparent_lon * _DEG_TO_RAD)) * _RAD_TO_DEG


def equation_of_time(L0: np.ndarray, M: np.ndarray, e: np.ndarray,
                     obliquity: np.ndarray) -> np.ndarray:
    """
    Equation of time

    Parameters
    ----------
    L0 : np.ndarray
        Geometric mean longitude of the sun (degrees)
    M : np.ndarray
        Geometric mean anomaly of the sun (degrees)
    e : np.ndarray
        Eccentricity of the Earth's orbit
    obliquity : np.ndarray
        Corrected obliquity of the ecliptic (degrees)

    Returns
    -------
    np.ndarray
        Apparent minus mean solar time (minutes)
    """
    y = np.tan(obliquity / 2.0 * _DEG_TO_RAD) ** 2
    L0_rad = L0 * _DEG_TO_RAD
    M_rad = M * _DEG_TO_RAD
    sin_M = np.sin(M_rad)
    eot = (y * np.sin(2.0 * L0_rad)
           - 2.0 * e * sin_M
           + 4.0 * e * y * sin_M * np.cos(2.0 * L0_rad)
           - 0.5 * y * y * np.sin(4.0 * L0_rad)
           - 1.25 * e * e * np.sin(2.0 * M_rad))
    return 4.0 * eot * _RAD_TO_DEG


# ============================================================
# Observer geometry
# ============================================================

def sunrise_hour_angle_cosine(latitude: np.ndarray,
                              delta: np.ndarray) -> np.ndarray:
    """
    Cosine of the hour angle at sunrise

    Values outside [-1, 1] mean the sun does not cross the horizon
    on that day: below -1 it stays up (polar day), above 1 it
    stays down (polar night).

    Parameters
    ----------
    latitude : float or np.ndarray
        Latitude of the site (degrees)
    delta : np.ndarray
        Sun declination (degrees)
    """
    phi = latitude * _DEG_TO_RAD
    d = delta * _DEG_TO_RAD
    return (np.cos(SUNRISE_ZENITH * _DEG_TO_RAD) / (np.cos(phi) * np.cos(d))
            - np.tan(phi) * np.tan(d))


def sunrise_hour_angle(latitude: np.ndarray, delta: np.ndarray) -> np.ndarray:
    """
    Hour angle at sunrise (degrees)

    NaN where there is no sunrise or sunset on that day.
    """
    cos_has = sunrise_hour_angle_cosine(latitude, delta)
    with np.errstate(invalid='ignore'):
        return np.arccos(cos_has) * _RAD_TO_DEG


def true_solar_time(frac_day: np.ndarray, eot: np.ndarray, longitude: float,
                    tz_offset: float = 0.0) -> np.ndarray:
    """True solar time in minutes, normalized to [0, 1440)"""
    tst = frac_day * _DAY_MINUTES + eot + 4.0 * longitude - 60.0 * tz_offset
    return floor_mod(tst, _DAY_MINUTES)


def hour_angle(tst: np.ndarray) -> np.ndarray:
    """
    Hour angle of the sun from true solar time

    Parameters
    ----------
    tst : np.ndarray
        True solar time (minutes)

    Returns
    -------
    np.ndarray
        Hour angle (degrees), morning negative and afternoon positive
    """
    quarter = np.asarray(tst, dtype=np.float64) / 4.0
    return np.where(quarter < 0.0, quarter + 180.0, quarter - 180.0)


def zenith_angle(latitude: np.ndarray, delta: np.ndarray,
                 omega: np.ndarray) -> np.ndarray:
    """
    Solar zenith angle (degrees)

    Parameters
    ----------
    latitude : float or np.ndarray
        Latitude of the site (degrees)
    delta : np.ndarray
        Sun declination (degrees)
    omega : np.ndarray
        Hour angle (degrees)
    """
    phi = latitude * _DEG_TO_RAD
    d = delta * _DEG_TO_RAD
    cos_z = (np.sin(phi) * np.sin(d)
             + np.cos(phi) * np.cos(d) * np.cos(omega * _DEG_TO_RAD))
    return np.arccos(np.clip(cos_z, -1.0, 1.0)) * _RAD_TO_DEG


def azimuth_angle(latitude: np.ndarray, delta: np.ndarray, omega: np.ndarray,
                  zenith: np.ndarray) -> np.ndarray:
    """
    Solar azimuth angle

    Parameters
    ----------
    latitude : float or np.ndarray
        Latitude of the site (degrees)
    delta : np.ndarray
        Sun declination (degrees)
    omega : np.ndarray
        Hour angle (degrees)
    zenith : np.ndarray
        Solar zenith angle (degrees)

    Returns
    -------
    np.ndarray
        Azimuth (degrees clockwise from north) in range [0, 360).
        Undefined (NaN) with the sun exactly overhead.
    """
    phi = latitude * _DEG_TO_RAD
    z = zenith * _DEG_TO_RAD
    with np.errstate(invalid='ignore', divide='ignore'):
        ratio = ((np.sin(phi) * np.cos(z) - np.sin(delta * _DEG_TO_RAD))
                 / (np.cos(phi) * np.sin(z)))
        gamma = np.arccos(np.clip(ratio, -1.0, 1.0)) * _RAD_TO_DEG
    azimuth = np.where(omega > 0.0, gamma + 180.0, 540.0 - gamma)
    return normalize_angle(azimuth)
