"""
Calendar arithmetic for schedule generation.
"""

from datetime import date, datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from amortlib.conventions.period import Period, TimeUnit, UnsupportedUnitError


def is_end_of_month(dt: Union[date, datetime]) -> bool:
    """Check if date is end of month."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return dt == get_month_end(dt.year, dt.month)


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)

    return next_month - timedelta(days=1)


def add_period(
    dt: Union[date, datetime], period: Period, end_of_month: bool = False
) -> date:
    """Shift a date by a (possibly negative) period.

    Month and year shifts clamp to the last day of a shorter month
    (Jan 31 + 1M -> Feb 28). With ``end_of_month`` set, a month-end start
    date always lands on a month end.
    """
    if isinstance(dt, datetime):
        dt = dt.date()

    n = period.length
    if period.unit == TimeUnit.DAYS:
        return dt + relativedelta(days=n)
    if period.unit == TimeUnit.WEEKS:
        return dt + relativedelta(weeks=n)
    if period.unit in (TimeUnit.MONTHS, TimeUnit.YEARS):
        months = n * 12 if period.unit == TimeUnit.YEARS else n
        shifted = dt + relativedelta(months=months)
        if end_of_month and is_end_of_month(dt):
            return get_month_end(shifted.year, shifted.month)
        return shifted
    raise UnsupportedUnitError(f"Cannot shift a date by {period}")
