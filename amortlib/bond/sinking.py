"""Sinking-fund schedules, notionals and redemptions.

The generated notional path is the outstanding balance of a level debt
service loan: coupon plus principal is the same every period, so early
periods retire little principal and later periods retire more.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Sequence, Union

import numpy as np

from amortlib import config
from amortlib.conventions.calendars import Calendar
from amortlib.conventions.period import Period, is_sub_period
from amortlib.conventions.types import BusinessDayAdjustment, DateGeneration, Frequency
from amortlib.schedule import Schedule, add_period, make_schedule

logger = logging.getLogger(__name__)


class IncompatibleFrequencyError(ValueError):
    """Raised when a sinking frequency does not evenly tile the bond tenor."""


def sinking_schedule(
    start_date: Union[date, datetime],
    tenor: Period,
    frequency: Frequency,
    calendar: Calendar,
) -> Schedule:
    """Unadjusted sinking dates from start to ``start + tenor``, anchored at maturity."""
    maturity = add_period(start_date, tenor)
    return make_schedule(
        start_date,
        maturity,
        frequency.period(),
        calendar,
        BusinessDayAdjustment.NO_ADJUSTMENT,
        BusinessDayAdjustment.NO_ADJUSTMENT,
        DateGeneration.BACKWARD,
        end_of_month=False,
    )


def sinking_notionals(
    start_date: Union[date, datetime],
    tenor: Period,
    frequency: Frequency,
    coupon_rate: float,
    initial_notional: float,
) -> List[float]:
    """Outstanding notional at each sinking date, starting at issue.

    Args:
        start_date: Accrual start; the path depends only on the tenor.
        tenor: Life of the bond.
        frequency: Sinking (and coupon) frequency.
        coupon_rate: Annual coupon rate as a decimal (0.05 for 5%).
        initial_notional: Face amount outstanding at start.

    Returns:
        ``n + 1`` notionals for ``n`` sinking periods, the first equal to
        ``initial_notional`` and the last exactly zero.
    """
    n_periods = is_sub_period(frequency.period(), tenor)
    if n_periods is None:
        raise IncompatibleFrequencyError(
            f"Bond frequency {frequency.name} is incompatible with the maturity tenor {tenor}"
        )

    notionals = np.empty(n_periods + 1)
    notionals[0] = initial_notional
    notionals[-1] = 0.0

    if n_periods > 1:
        coupon = coupon_rate / frequency.periods_per_year
        # log1p/expm1 keep T - 1 and T - C_i accurate for rates too small to move 1 + c
        growth = np.log1p(coupon)
        total_growth = np.expm1(n_periods * growth)
        if total_growth == 0.0:
            # Limit of the annuity formula: equal principal installments
            elapsed = np.arange(1, n_periods) / n_periods
            notionals[1:-1] = initial_notional * (1.0 - elapsed)
        else:
            partial_growth = np.expm1(np.arange(1, n_periods) * growth)
            notionals[1:-1] = initial_notional * (total_growth - partial_growth) / total_growth

    logger.debug(
        "Sinking notionals for %s over %s at %s: %s periods",
        frequency.name, tenor, coupon_rate, n_periods,
    )
    return notionals.tolist()


def sinking_redemptions(
    notionals: Sequence[float], initial_notional: float
) -> List[float]:
    """Principal retired each period, as a price per ``config.DEFAULT_REDEMPTION`` of face."""
    if initial_notional == 0:
        raise ValueError("initial_notional must be non-zero")
    return [
        (before - after) / initial_notional * config.DEFAULT_REDEMPTION
        for before, after in zip(notionals[:-1], notionals[1:])
    ]
