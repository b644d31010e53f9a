"""
test_math.py
Tests angle normalization and polynomial helpers
"""
import pytest
import numpy as np

from solarpos.astro.ephemeris import floor_mod, normalize_angle, polynomial_sum


def test_normalize_angle():
    """
    Tests the normalization of angles to between 0 and 360 degrees
    """
    # test angles
    angles = np.array([-180, -90, 0, 90, 180, 270, 360, 450])
    # expected values
    exp = np.array([180, 270, 0, 90, 180, 270, 0, 90])
    # test normalization of angles
    test = normalize_angle(angles)
    assert np.all(exp == test)


def test_normalize_angle_radians():
    """
    Tests the normalization of angles in radians
    """
    angles = np.array([-np.pi, 3 * np.pi])
    exp = np.array([np.pi, np.pi])
    assert np.allclose(normalize_angle(angles, circle=2 * np.pi), exp)


@pytest.mark.parametrize("x, m, exp", [
    (-1.0, 360.0, 359.0),
    (-721.0, 360.0, 359.0),
    (725.5, 360.0, 5.5),
    (-0.25, 1440.0, 1439.75),
    (1440.0, 1440.0, 0.0),
])
def test_floor_mod(x, m, exp):
    """
    Floored modulo never returns a negative remainder for positive divisors
    """
    assert floor_mod(x, m) == pytest.approx(exp)


def test_floor_mod_differs_from_fmod():
    """
    Truncating remainder keeps the sign of the dividend
    """
    x = np.array([-10.0, -370.0])
    assert np.all(np.fmod(x, 360.0) < 0)
    assert np.allclose(floor_mod(x, 360.0), [350.0, 350.0])


def test_floor_mod_tiny_negative():
    """
    Values just below zero stay inside [0, m)
    """
    r = floor_mod(-1e-17, 1440.0)
    assert 0.0 <= r < 1440.0


def test_floor_mod_nan():
    """
    NaN propagates
    """
    assert np.isnan(floor_mod(np.nan, 360.0))


def test_polynomial_sum():
    """
    Tests the polynomial sum with Horner's method
    """
    coefficients = np.array([1.0, 2.0, 3.0])
    t = np.array([0.0, 1.0, 2.0])
    # 1 + 2t + 3t^2
    exp = np.array([1.0, 6.0, 17.0])
    assert np.allclose(polynomial_sum(coefficients, t), exp)


def test_polynomial_sum_scalar():
    """
    Scalar input gives a scalar-shaped result
    """
    result = polynomial_sum(np.array([2.0, 0.5]), 4.0)
    assert np.ndim(result) == 0
    assert result == pytest.approx(4.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
