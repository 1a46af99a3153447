"""
Basic types and enums used across the scheduling system.
"""

from enum import Enum
from typing import Optional

from .period import Period, TimeUnit


class Frequency(Enum):
    """Payment frequencies, valued in payments per year."""

    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12
    EVERY_FOURTH_WEEK = 13
    BIWEEKLY = 26
    WEEKLY = 52
    DAILY = 365

    @property
    def periods_per_year(self) -> int:
        return self.value

    def period(self) -> Period:
        """Equivalent time period (e.g. SEMIANNUAL -> 6M)."""
        return _FREQUENCY_PERIODS[self]

    @classmethod
    def from_period(cls, period: Period) -> Optional["Frequency"]:
        """Named frequency matching a period, or None for irregular tenors."""
        for frequency, candidate in _FREQUENCY_PERIODS.items():
            if candidate == period:
                return frequency
        return None


_FREQUENCY_PERIODS = {
    Frequency.ONCE: Period(0, TimeUnit.YEARS),
    Frequency.ANNUAL: Period(1, TimeUnit.YEARS),
    Frequency.SEMIANNUAL: Period(6, TimeUnit.MONTHS),
    Frequency.EVERY_FOURTH_MONTH: Period(4, TimeUnit.MONTHS),
    Frequency.QUARTERLY: Period(3, TimeUnit.MONTHS),
    Frequency.BIMONTHLY: Period(2, TimeUnit.MONTHS),
    Frequency.MONTHLY: Period(1, TimeUnit.MONTHS),
    Frequency.EVERY_FOURTH_WEEK: Period(4, TimeUnit.WEEKS),
    Frequency.BIWEEKLY: Period(2, TimeUnit.WEEKS),
    Frequency.WEEKLY: Period(1, TimeUnit.WEEKS),
    Frequency.DAILY: Period(1, TimeUnit.DAYS),
}


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class DateGeneration(Enum):
    """Direction in which schedule dates are rolled out."""

    BACKWARD = "BACKWARD"  # anchored on the termination date
    FORWARD = "FORWARD"  # anchored on the effective date
