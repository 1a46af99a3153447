'''Date normalization tests.'''

import datetime

import pandas as pd
import pytest

from amortlib.utils import datetime_to_str, to_date


@pytest.mark.parametrize('value', [
    datetime.date(2024, 3, 5),
    datetime.datetime(2024, 3, 5, 17, 30),
    pd.Timestamp('2024-03-05 09:00'),
    '2024-03-05',
    '20240305',
])
def test_to_date(value):
    result = to_date(value)
    assert result == datetime.date(2024, 3, 5)
    assert type(result) is datetime.date


def test_to_date_rejects_bad_input():
    with pytest.raises(ValueError, match='Unsupported date string format'):
        to_date('05/03/2024')
    with pytest.raises(TypeError, match='Unsupported type for date'):
        to_date(20240305)


def test_datetime_to_str():
    assert datetime_to_str('20240305') == '2024-03-05'
