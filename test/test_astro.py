"""
test_astro.py
Tests astronomical routines of the NOAA solar calculator
"""
import pytest
import numpy as np
from datetime import datetime

from solarpos import datetime_to_timestamp
from solarpos.astro import ephemeris


def _elements(dt):
    """Declination and equation of time for a UTC datetime"""
    unix_days, frac_day = ephemeris.split_timestamp(datetime_to_timestamp(dt))
    T = ephemeris.julian_centuries(ephemeris.julian_day(unix_days, frac_day))
    L0 = ephemeris.mean_longitude(T)
    M = ephemeris.mean_anomaly(T)
    e = ephemeris.eccentricity(T)
    C = ephemeris.equation_of_center(T, M)
    lam = ephemeris.apparent_longitude(T, L0 + C)
    eps = ephemeris.obliquity_correction(T, ephemeris.mean_obliquity(T))
    return ephemeris.declination(eps, lam), ephemeris.equation_of_time(L0, M, e, eps)


def test_split_timestamp():
    """Tests splitting Unix time into days and fraction of day"""
    t = np.array([0, 43200, 86400 + 21600, 90061])
    unix_days, frac_day = ephemeris.split_timestamp(t)
    assert np.all(unix_days == [0, 0, 1, 1])
    assert np.allclose(frac_day, [0.0, 0.5, 0.25, 3661.0 / 86400.0])


def test_julian_day_unix_epoch():
    """Unix epoch is JD 2440587.5"""
    assert ephemeris.julian_day(0, 0.0) == 2440587.5


def test_julian_day_timezone():
    """Local clock west of Greenwich is behind GMT"""
    jd = ephemeris.julian_day(0, 0.0, tz_offset=-6)
    assert jd == pytest.approx(2440587.75)


def test_julian_centuries_j2000():
    """2000-01-01T12:00:00 is the J2000.0 epoch"""
    t = datetime_to_timestamp(datetime(2000, 1, 1, 12, 0, 0))
    unix_days, frac_day = ephemeris.split_timestamp(t)
    jd = ephemeris.julian_day(unix_days, frac_day)
    assert jd == pytest.approx(2451545.0)
    assert ephemeris.julian_centuries(jd) == pytest.approx(0.0)


def test_elements_at_j2000():
    """Orbital elements reduce to their constant terms at J2000.0"""
    assert ephemeris.mean_longitude(0.0) == pytest.approx(280.46646)
    assert ephemeris.mean_anomaly(0.0) == pytest.approx(357.52911)
    assert ephemeris.eccentricity(0.0) == pytest.approx(0.016708634)
    assert ephemeris.mean_obliquity(0.0) == pytest.approx(23.0 + (26.0 + 21.448 / 60.0) / 60.0)


def test_mean_longitude_normalized():
    """Mean longitude stays in [0, 360) across centuries"""
    T = np.linspace(-1.0, 1.0, 1001)
    L0 = ephemeris.mean_longitude(T)
    assert np.all(L0 >= 0.0)
    assert np.all(L0 < 360.0)


@pytest.mark.parametrize("dt, exp", [
    (datetime(2020, 6, 21, 12), 23.44),
    (datetime(2020, 12, 21, 12), -23.44),
    (datetime(2020, 3, 20, 12), 0.0),
    (datetime(2020, 9, 22, 12), 0.0),
])
def test_declination(dt, exp):
    """Declination at solstices and equinoxes"""
    delta, _ = _elements(dt)
    assert abs(delta - exp) < 0.5


@pytest.mark.parametrize("dt, low, high", [
    (datetime(2020, 2, 11, 12), -15.0, -13.5),
    (datetime(2020, 5, 14, 12), 3.0, 4.5),
    (datetime(2020, 7, 26, 12), -7.0, -6.0),
    (datetime(2020, 11, 3, 12), 16.0, 17.0),
])
def test_equation_of_time(dt, low, high):
    """Equation of time near its yearly extremes"""
    _, eot = _elements(dt)
    assert low < eot < high


def test_sunrise_hour_angle_equator():
    """At the equator with zero declination the sun rises 90.833 deg before noon"""
    has = ephemeris.sunrise_hour_angle(0.0, 0.0)
    assert has == pytest.approx(ephemeris.SUNRISE_ZENITH)


def test_sunrise_hour_angle_polar():
    """No sunrise hour angle during polar day or night"""
    assert ephemeris.sunrise_hour_angle_cosine(70.0, 23.44) < -1.0
    assert ephemeris.sunrise_hour_angle_cosine(70.0, -23.44) > 1.0
    assert np.isnan(ephemeris.sunrise_hour_angle(70.0, 23.44))
    assert np.isnan(ephemeris.sunrise_hour_angle(70.0, -23.44))


def test_true_solar_time_range():
    """True solar time is normalized to [0, 1440)"""
    frac_day = np.linspace(0.0, 1.0, 97, endpoint=False)
    for longitude, tz_offset in [(-179.9, 12), (179.9, -12), (0.0, 0)]:
        tst = ephemeris.true_solar_time(frac_day, -16.0, longitude, tz_offset)
        assert np.all(tst >= 0.0)
        assert np.all(tst < 1440.0)


def test_hour_angle():
    """Hour angle is zero at solar noon, negative in the morning"""
    tst = np.array([0.0, 360.0, 720.0, 1080.0, 1439.0])
    exp = np.array([-180.0, -90.0, 0.0, 90.0, 179.75])
    assert np.allclose(ephemeris.hour_angle(tst), exp)


def test_hour_angle_negative_branch():
    """Negative true solar time takes the +180 branch"""
    assert ephemeris.hour_angle(-4.0) == pytest.approx(179.0)


def test_zenith_angle():
    """Sun overhead at noon when declination equals latitude"""
    assert ephemeris.zenith_angle(23.0, 23.0, 0.0) == pytest.approx(0.0, abs=1e-5)
    assert ephemeris.zenith_angle(45.0, 0.0, 0.0) == pytest.approx(45.0)
    # geometric sunrise at the equator on an equinox
    assert ephemeris.zenith_angle(0.0, 0.0, -90.0) == pytest.approx(90.0)


def test_azimuth_angle():
    """Azimuth is clockwise from north"""
    # noon sun due south from the northern hemisphere
    z = ephemeris.zenith_angle(45.0, 0.0, 0.0)
    assert ephemeris.azimuth_angle(45.0, 0.0, 0.0, z) == pytest.approx(180.0)
    # noon sun due north from the southern hemisphere
    z = ephemeris.zenith_angle(-45.0, 0.0, 0.0)
    az = ephemeris.azimuth_angle(-45.0, 0.0, 0.0, z)
    assert min(az, 360.0 - az) < 1e-4
    # equinox sunrise at the equator due east, sunset due west
    z = ephemeris.zenith_angle(0.0, 0.0, -60.0)
    assert ephemeris.azimuth_angle(0.0, 0.0, -60.0, z) == pytest.approx(90.0)
    z = ephemeris.zenith_angle(0.0, 0.0, 60.0)
    assert ephemeris.azimuth_angle(0.0, 0.0, 60.0, z) == pytest.approx(270.0)


def test_azimuth_angle_range():
    """Azimuth stays in [0, 360)"""
    omega = np.linspace(-179.0, 179.0, 359)
    for latitude in (-60.0, -10.0, 10.0, 60.0):
        z = ephemeris.zenith_angle(latitude, 15.0, omega)
        az = ephemeris.azimuth_angle(latitude, 15.0, omega, z)
        assert np.all(az >= 0.0)
        assert np.all(az < 360.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
