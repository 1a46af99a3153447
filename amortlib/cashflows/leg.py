"""Fixed-rate coupon leg construction."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from amortlib import config
from amortlib.conventions.calendars import Calendar
from amortlib.conventions.daycount import DayCountConvention
from amortlib.conventions.types import BusinessDayAdjustment
from amortlib.schedule.core import Schedule

from .core import CashFlow, FixedRateCoupon

logger = logging.getLogger(__name__)

Leg = List[CashFlow]


def _nth_or_last(values: Sequence[float], i: int) -> float:
    return float(values[i]) if i < len(values) else float(values[-1])


def build_fixed_rate_leg(
    schedule: Schedule,
    notionals: Sequence[float],
    coupon_rates: Sequence[float],
    day_count: DayCountConvention,
    payment_adjustment: BusinessDayAdjustment = config.DEFAULT_PAYMENT_ADJUSTMENT,
    payment_calendar: Optional[Calendar] = None,
) -> Leg:
    """Return one fixed-rate coupon per schedule period.

    Notionals and rates apply period by period; when either sequence is
    shorter than the schedule its last value carries forward. Payments fall
    on the accrual end date adjusted on ``payment_calendar`` (the schedule's
    calendar unless given).
    """
    if not notionals or not coupon_rates:
        logger.warning(
            "No %s given; returning an empty coupon leg",
            "notionals" if not notionals else "coupon rates",
        )
        return []

    calendar = payment_calendar if payment_calendar is not None else schedule.calendar
    leg: Leg = []
    for i, (start, end) in enumerate(schedule.periods):
        leg.append(
            FixedRateCoupon(
                payment_date=calendar.adjust(end, payment_adjustment),
                nominal=_nth_or_last(notionals, i),
                rate=_nth_or_last(coupon_rates, i),
                day_count=day_count,
                accrual_start=start,
                accrual_end=end,
            )
        )
    logger.debug("Built fixed-rate leg with %s coupons", len(leg))
    return leg
