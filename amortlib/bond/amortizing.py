from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence, Union

from amortlib import config
from amortlib.cashflows import CashFlowKind, Leg, build_fixed_rate_leg
from amortlib.conventions.calendars import Calendar
from amortlib.conventions.daycount import DayCountConvention
from amortlib.conventions.period import Period
from amortlib.conventions.types import BusinessDayAdjustment, Frequency
from amortlib.schedule import Schedule
from amortlib.utils.date import to_date

from .base import Bond, EmptyCashFlowError
from .sinking import sinking_notionals, sinking_redemptions, sinking_schedule

logger = logging.getLogger(__name__)


class TypeMismatchError(TypeError):
    """Raised when a cash flow is not of the kind an accessor requires."""


def initial_notional(leg: Leg) -> float:
    """Face amount of a leg, read from its first fixed-rate coupon."""
    if not leg:
        raise EmptyCashFlowError("leg has no cash flows")
    first = leg[0]
    if first.kind != CashFlowKind.COUPON:
        raise TypeMismatchError(
            f"Coupon input is not a fixed rate coupon (got {first.kind.value})"
        )
    return first.nominal


class AmortizingFixedRateBond(Bond):
    def __init__(
        self,
        settlement_days: int,
        notionals: Sequence[float],
        schedule: Schedule,
        coupons: Sequence[float],
        day_count: DayCountConvention,
        payment_convention: BusinessDayAdjustment = config.DEFAULT_PAYMENT_ADJUSTMENT,
        redemptions: Optional[Sequence[float]] = None,
        issue_date: Union[date, datetime, str, None] = None,
    ):
        """Fixed-rate bond whose notional steps down over its life.

        Args:
            settlement_days: Business days between trade and settlement
            notionals: Outstanding notional per coupon period (last value repeats)
            schedule: Accrual schedule; its end date is the maturity
            coupons: Annual coupon rate per period as decimals (last value repeats)
            day_count: Accrual day count convention
            payment_convention: Adjustment of payment dates on the schedule calendar
            redemptions: Principal repaid at each notional step, in percent of the
                initial notional. Derived from the notional path when omitted.
            issue_date: Issue date (optional)
        """
        super().__init__(settlement_days, schedule.calendar, issue_date)
        self.frequency: Optional[Frequency] = Frequency.from_period(schedule.tenor)
        self.day_count = day_count
        self.maturity_date = schedule.end_date

        self._cashflows = build_fixed_rate_leg(
            schedule, notionals, coupons, day_count, payment_convention
        )
        self._ensure_cashflows()

        face = initial_notional(self._cashflows)
        self._calculate_notionals_from_cashflows()
        if redemptions is None:
            redemptions = sinking_redemptions(self._notionals, face)
        self._add_redemptions([face * r / config.DEFAULT_REDEMPTION for r in redemptions])

        logger.debug(
            "Built amortizing bond maturing %s: %s coupons, %s redemptions",
            self.maturity_date, len(self.coupons), len(self.redemptions),
        )

    @classmethod
    def sinking_fund(
        cls,
        settlement_days: int,
        calendar: Calendar,
        initial_face_amount: float,
        start_date: Union[date, datetime, str],
        bond_tenor: Period,
        sinking_frequency: Frequency,
        coupon_rate: float,
        day_count: DayCountConvention,
        payment_convention: BusinessDayAdjustment = config.DEFAULT_PAYMENT_ADJUSTMENT,
        issue_date: Union[date, datetime, str, None] = None,
    ) -> "AmortizingFixedRateBond":
        """Level debt service bond generated from a single coupon rate.

        The notional sinks every ``sinking_frequency`` period so that coupon
        plus principal stays constant, reaching zero at ``start_date +
        bond_tenor``.
        """
        if initial_face_amount <= 0:
            raise ValueError("Initial face amount must be positive")
        start = to_date(start_date)

        schedule = sinking_schedule(start, bond_tenor, sinking_frequency, calendar)
        notionals = sinking_notionals(
            start, bond_tenor, sinking_frequency, coupon_rate, initial_face_amount
        )
        redemptions = sinking_redemptions(notionals, initial_face_amount)
        return cls(
            settlement_days,
            notionals,
            schedule,
            [coupon_rate],
            day_count,
            payment_convention,
            redemptions,
            issue_date,
        )
