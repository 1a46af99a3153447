'''Conftest module.'''

import datetime

import pytest

from amortlib import config as amortlib_config
from amortlib.conventions import get_calendar


def pytest_configure(config):
    config.addinivalue_line('markers', 'smoke: mark test as smoke')


@pytest.fixture
def weekend_calendar():
    return get_calendar('WEEKEND')


@pytest.fixture
def start():
    return datetime.date(2020, 1, 15)


@pytest.fixture
def restore_default_calendar():
    previous = amortlib_config.get_default_calendar()
    yield
    amortlib_config._DEFAULT_CALENDAR = previous
