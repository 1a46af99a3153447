'''Calendar, day count and configuration tests.'''

import datetime

import pytest

from amortlib import config
from amortlib.conventions import (
    ACT_360,
    ACT_365F,
    THIRTY_360U,
    BusinessDayAdjustment,
    get_calendar,
    get_day_count_convention,
)

_SAT = datetime.date(2024, 6, 1)
_MON = datetime.date(2024, 6, 3)
_FRI = datetime.date(2024, 5, 31)


def test_get_calendar_is_case_insensitive():
    assert get_calendar('target') is get_calendar('TARGET')
    assert get_calendar('EUR') is get_calendar('TARGET')


def test_get_calendar_unknown():
    with pytest.raises(ValueError, match='Unknown calendar'):
        get_calendar('MARS')


def test_weekend_calendar_business_days(weekend_calendar):
    assert weekend_calendar.is_business_day(_FRI)
    assert not weekend_calendar.is_business_day(_SAT)
    assert weekend_calendar.is_holiday(_SAT)


@pytest.mark.parametrize('adjustment, expected', [
    (BusinessDayAdjustment.NO_ADJUSTMENT, _SAT),
    (BusinessDayAdjustment.FOLLOWING, _MON),
    (BusinessDayAdjustment.MODIFIED_FOLLOWING, _MON),
    (BusinessDayAdjustment.PRECEDING, _FRI),
    (BusinessDayAdjustment.MODIFIED_PRECEDING, _MON),
])
def test_adjust(weekend_calendar, adjustment, expected):
    assert weekend_calendar.adjust(_SAT, adjustment) == expected


def test_modified_following_stays_in_month(weekend_calendar):
    # Saturday 2024-08-31 would roll into September
    assert weekend_calendar.adjust(
        datetime.date(2024, 8, 31), BusinessDayAdjustment.MODIFIED_FOLLOWING
    ) == datetime.date(2024, 8, 30)


def test_target_holidays():
    target = get_calendar('TARGET')
    assert not target.is_business_day(datetime.date(2024, 12, 25))
    assert not target.is_business_day(datetime.date(2024, 5, 1))
    assert target.is_business_day(datetime.date(2024, 5, 2))


def test_add_business_days(weekend_calendar):
    assert weekend_calendar.add_business_days(_FRI, 2) == datetime.date(2024, 6, 4)
    assert weekend_calendar.add_business_days(_FRI, 0) == _FRI


def test_business_days_between(weekend_calendar):
    assert weekend_calendar.business_days_between(_FRI, datetime.date(2024, 6, 7)) == 5


@pytest.mark.parametrize('name, expected', [
    ('act/360', ACT_360),
    ('ACT/365', ACT_365F),
    ('30/360', THIRTY_360U),
])
def test_day_count_registry(name, expected):
    assert get_day_count_convention(name) is expected


def test_day_count_registry_unknown():
    with pytest.raises(ValueError, match='Unknown day count convention'):
        get_day_count_convention('BUS/252 MARS')


def test_year_fractions():
    start, end = datetime.date(2024, 1, 15), datetime.date(2024, 7, 15)
    assert ACT_360.day_count(start, end) == 182
    assert ACT_360.year_fraction(start, end) == pytest.approx(182 / 360)
    assert ACT_365F.year_fraction(start, end) == pytest.approx(182 / 365)
    assert THIRTY_360U.year_fraction(start, end) == pytest.approx(0.5)


def test_default_calendar(restore_default_calendar):
    assert config.get_default_calendar().name == 'TARGET'
    config.set_default_calendar('weekend')
    assert config.get_default_calendar() is get_calendar('WEEKEND')

    with pytest.raises(ValueError, match='Unknown calendar'):
        config.set_default_calendar('MARS')
