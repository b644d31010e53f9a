import pytest
from datetime import datetime

from solarpos import SolarCalculator, cache, datetime_to_timestamp

# Monterey, California on Pacific Standard Time
MONTEREY = (-8, 36.62, -121.904)


@pytest.fixture
def monterey():
    """ Returns a calculator for Monterey, California """
    return SolarCalculator(*MONTEREY)


@pytest.fixture
def summer_solstice():
    """ 2020-06-21 12:00 on the local clock """
    return datetime_to_timestamp(datetime(2020, 6, 21, 12, 0, 0))


@pytest.fixture
def winter_solstice():
    """ 2020-12-21 12:00 on the local clock """
    return datetime_to_timestamp(datetime(2020, 12, 21, 12, 0, 0))


@pytest.fixture
def march_equinox():
    """ 2020-03-20 12:00 on the local clock """
    return datetime_to_timestamp(datetime(2020, 3, 20, 12, 0, 0))


@pytest.fixture(autouse=True)
def reset_cache_state():
    """ Restore process-wide cache state around every test """
    cache._state._global_enabled = True
    cache._state._range_warnings = True
    cache._state.reset_stats()
    yield
    cache._state._global_enabled = True
    cache._state._range_warnings = True
