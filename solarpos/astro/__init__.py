"""
solarpos.astro - Astronomical calculation module

Provides functions for:
- Julian day conversion of Unix time
- Solar orbital elements and equation of time
- Observer geometry (hour angles, zenith and azimuth)

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from .ephemeris import (
    SUNRISE_ZENITH,
    REFRACTION_CORRECTION,
    polynomial_sum,
    floor_mod,
    normalize_angle,
    split_timestamp,
    julian_day,
    julian_centuries,
    mean_longitude,
    mean_anomaly,
    eccentricity,
    equation_of_center,
    apparent_longitude,
    mean_obliquity,
    obliquity_correction,
    declination,
    equation_of_time,
    sunrise_hour_angle_cosine,
    sunrise_hour_angle,
    true_solar_time,
    hour_angle,
    zenith_angle,
    azimuth_angle,
)

__all__ = [
    'SUNRISE_ZENITH',
    'REFRACTION_CORRECTION',
    'polynomial_sum',
    'floor_mod',
    'normalize_angle',
    'split_timestamp',
    'julian_day',
    'julian_centuries',
    'mean_longitude',
    'mean_anomaly',
    'eccentricity',
    'equation_of_center',
    'apparent_longitude',
    'mean_obliquity',
    'obliquity_correction',
    'declination',
    'equation_of_time',
    'sunrise_hour_angle_cosine',
    'sunrise_hour_angle',
    'true_solar_time',
    'hour_angle',
    'zenith_angle',
    'azimuth_angle',
]
