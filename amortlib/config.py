"""
Package-wide defaults for bond construction.
"""

from typing import Optional

from amortlib.conventions.calendars import Calendar, get_calendar
from amortlib.conventions.types import BusinessDayAdjustment

# Default market settings
_DEFAULT_CALENDAR_NAME = "TARGET"
_DEFAULT_CALENDAR: Optional[Calendar] = None  # Will be initialized on first use

DEFAULT_SETTLEMENT_DAYS = 2
DEFAULT_PAYMENT_ADJUSTMENT = BusinessDayAdjustment.FOLLOWING
DEFAULT_REDEMPTION = 100.0

# Relative tolerance under which two coupon nominals count as the same notional
NOTIONAL_TOLERANCE = 1e-12


def get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar(_DEFAULT_CALENDAR_NAME)
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar_name: str) -> None:
    """Set the default calendar used when none is supplied."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = get_calendar(calendar_name)
