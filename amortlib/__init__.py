"""Amortizing and sinking-fund bond cash flows.

This package builds the cash-flow leg of fixed-rate bonds whose outstanding
principal declines over their life, either from an explicit notional schedule
or generated from a coupon rate, tenor and sinking frequency.

Key modules:
- bond: Amortizing bond constructors and sinking-fund calculations
- cashflows: Coupon and redemption cash flows, fixed-rate leg builder
- schedule: Payment schedule generation
- conventions: Periods, frequencies, calendars and day count conventions
"""

__version__ = "1.0.0"

from amortlib.bond import (
    AmortizingFixedRateBond,
    Bond,
    EmptyCashFlowError,
    IncompatibleFrequencyError,
    TypeMismatchError,
    initial_notional,
    sinking_notionals,
    sinking_redemptions,
    sinking_schedule,
)
from amortlib.conventions import (
    BusinessDayAdjustment,
    DateGeneration,
    Frequency,
    Period,
    TimeUnit,
    UnsupportedUnitError,
    day_range,
    get_calendar,
    get_day_count_convention,
    is_sub_period,
)

__all__ = [
    "__version__",
    "AmortizingFixedRateBond",
    "Bond",
    "BusinessDayAdjustment",
    "DateGeneration",
    "EmptyCashFlowError",
    "Frequency",
    "IncompatibleFrequencyError",
    "Period",
    "TimeUnit",
    "TypeMismatchError",
    "UnsupportedUnitError",
    "day_range",
    "get_calendar",
    "get_day_count_convention",
    "initial_notional",
    "is_sub_period",
    "sinking_notionals",
    "sinking_redemptions",
    "sinking_schedule",
]
