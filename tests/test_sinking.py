'''Sinking-fund notional and redemption tests.'''

import math

import pytest

from amortlib import config
from amortlib.bond import IncompatibleFrequencyError, sinking_notionals, sinking_redemptions
from amortlib.conventions import Frequency, Period, TimeUnit

_1Y = Period(1, TimeUnit.YEARS)
_5Y = Period(5, TimeUnit.YEARS)


@pytest.mark.smoke
def test_five_year_semiannual(start):
    notionals = sinking_notionals(start, _5Y, Frequency.SEMIANNUAL, 0.05, 1_000_000.0)

    assert len(notionals) == 11
    assert notionals[0] == 1_000_000.0
    assert notionals[-1] == 0.0
    assert all(a > b for a, b in zip(notionals, notionals[1:]))


def test_one_year_monthly(start):
    notionals = sinking_notionals(start, _1Y, Frequency.MONTHLY, 0.06, 100.0)
    assert len(notionals) == 13


def test_level_debt_service(start):
    '''Coupon plus principal is the same in every period.'''
    rate, face = 0.08, 100.0
    notionals = sinking_notionals(start, _5Y, Frequency.SEMIANNUAL, rate, face)
    c = rate / 2

    payments = [n * c + (n - m) for n, m in zip(notionals, notionals[1:])]
    annuity = face * c / (1 - (1 + c) ** -10)

    for payment in payments:
        assert payment == pytest.approx(annuity, rel=1e-12)


def test_interior_formula(start):
    rate, face = 0.1, 1000.0
    notionals = sinking_notionals(start, Period(2, TimeUnit.YEARS), Frequency.ANNUAL, rate, face)
    expected = face * (1.1 - 0.1 / (1 - 1 / 1.21))
    assert notionals == pytest.approx([face, expected, 0.0])
    assert notionals[1] == pytest.approx(523.8095238095, rel=1e-9)


def test_zero_coupon_collapses_to_equal_installments(start):
    notionals = sinking_notionals(start, _1Y, Frequency.QUARTERLY, 0.0, 100.0)
    assert notionals == pytest.approx([100.0, 75.0, 50.0, 25.0, 0.0])

    redemptions = sinking_redemptions(notionals, 100.0)
    assert redemptions == pytest.approx([25.0, 25.0, 25.0, 25.0])


def test_single_period(start):
    assert sinking_notionals(start, _1Y, Frequency.ANNUAL, 0.05, 250.0) == [250.0, 0.0]
    assert sinking_redemptions([250.0, 0.0], 250.0) == [100.0]


def test_incompatible_frequency(start):
    with pytest.raises(IncompatibleFrequencyError, match='incompatible with the maturity tenor'):
        sinking_notionals(start, Period(18, TimeUnit.MONTHS), Frequency.ANNUAL, 0.05, 100.0)

    with pytest.raises(IncompatibleFrequencyError):
        sinking_notionals(start, _1Y, Frequency.WEEKLY, 0.05, 100.0)

    with pytest.raises(IncompatibleFrequencyError):
        sinking_notionals(start, _1Y, Frequency.ONCE, 0.05, 100.0)


def test_incompatible_frequency_is_a_value_error(start):
    with pytest.raises(ValueError):
        sinking_notionals(start, Period(7, TimeUnit.MONTHS), Frequency.QUARTERLY, 0.05, 100.0)


@pytest.mark.parametrize('tenor, frequency, rate', [
    (_5Y, Frequency.SEMIANNUAL, 0.05),
    (Period(30, TimeUnit.YEARS), Frequency.MONTHLY, 0.0725),
    (Period(10, TimeUnit.YEARS), Frequency.QUARTERLY, 0.0),
    (Period(2, TimeUnit.YEARS), Frequency.EVERY_FOURTH_MONTH, 0.12),
    (Period(12, TimeUnit.WEEKS), Frequency.WEEKLY, 0.03),
])
def test_redemptions_sum_to_par(start, tenor, frequency, rate):
    notionals = sinking_notionals(start, tenor, frequency, rate, 5_000.0)
    redemptions = sinking_redemptions(notionals, 5_000.0)

    assert len(redemptions) == len(notionals) - 1
    assert math.fsum(redemptions) == pytest.approx(100.0, abs=1e-8)
    for i, r in enumerate(redemptions):
        assert r == pytest.approx(100 * (notionals[i] - notionals[i + 1]) / 5_000.0)


def test_redemptions_increase_for_positive_rate(start):
    redemptions = sinking_redemptions(
        sinking_notionals(start, _5Y, Frequency.SEMIANNUAL, 0.05, 100.0), 100.0
    )
    assert all(a < b for a, b in zip(redemptions, redemptions[1:]))


def test_redemptions_require_face():
    with pytest.raises(ValueError, match='initial_notional must be non-zero'):
        sinking_redemptions([0.0, 0.0], 0.0)


def test_deterministic(start):
    first = sinking_notionals(start, _5Y, Frequency.QUARTERLY, 0.045, 1e6)
    second = sinking_notionals(start, _5Y, Frequency.QUARTERLY, 0.045, 1e6)
    assert first == second
    assert sinking_redemptions(first, 1e6) == sinking_redemptions(second, 1e6)


@pytest.mark.parametrize('rate', [1e-17, 1e-12])
def test_tiny_coupon_stays_finite(start, rate):
    notionals = sinking_notionals(start, _1Y, Frequency.QUARTERLY, rate, 100.0)

    assert all(math.isfinite(n) for n in notionals)
    assert notionals == pytest.approx([100.0, 75.0, 50.0, 25.0, 0.0], rel=1e-9)
    assert all(a > b for a, b in zip(notionals, notionals[1:]))


def test_redemptions_scale_with_default_redemption(start, monkeypatch):
    notionals = sinking_notionals(start, _1Y, Frequency.QUARTERLY, 0.0, 100.0)
    monkeypatch.setattr(config, 'DEFAULT_REDEMPTION', 1.0)
    assert sinking_redemptions(notionals, 100.0) == pytest.approx([0.25] * 4)
