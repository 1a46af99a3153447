"""
Cash flow types making up a bond leg.

Every flow carries a ``kind`` tag so callers can tell coupons and principal
repayments apart without isinstance checks.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar

from amortlib.conventions.daycount import DayCountConvention


class CashFlowKind(Enum):
    COUPON = "COUPON"
    REDEMPTION = "REDEMPTION"


@dataclass(frozen=True)
class CashFlow:
    """A dated monetary amount."""

    payment_date: date

    kind: ClassVar[CashFlowKind]

    @property
    def date(self) -> date:
        return self.payment_date


@dataclass(frozen=True)
class FixedRateCoupon(CashFlow):
    """Interest accrued at a fixed rate on a nominal over one period."""

    nominal: float
    rate: float
    day_count: DayCountConvention
    accrual_start: date
    accrual_end: date

    kind: ClassVar[CashFlowKind] = CashFlowKind.COUPON

    @property
    def accrual_period(self) -> float:
        return self.day_count.year_fraction(self.accrual_start, self.accrual_end)

    @property
    def amount(self) -> float:
        return self.nominal * self.rate * self.accrual_period

    def accrued_amount(self, as_of: date) -> float:
        """Interest accrued from accrual start up to ``as_of``."""
        if as_of <= self.accrual_start or as_of > self.payment_date:
            return 0.0
        end = min(as_of, self.accrual_end)
        return self.nominal * self.rate * self.day_count.year_fraction(self.accrual_start, end)


@dataclass(frozen=True)
class Redemption(CashFlow):
    """Repayment of principal."""

    amount: float

    kind: ClassVar[CashFlowKind] = CashFlowKind.REDEMPTION
