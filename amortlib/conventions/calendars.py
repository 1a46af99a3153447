"""
QuantLib-backed business calendars.

Holiday rules are taken from QuantLib; this module only converts between
Python and QuantLib dates and maps the package's adjustment enum onto
QuantLib business day conventions.
"""

from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

from .types import BusinessDayAdjustment


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


_QL_CONVENTIONS = {
    BusinessDayAdjustment.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayAdjustment.FOLLOWING: ql.Following,
    BusinessDayAdjustment.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayAdjustment.PRECEDING: ql.Preceding,
    BusinessDayAdjustment.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}


class Calendar:
    """Business day calendar wrapping a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def adjust(
        self,
        dt: Union[date, datetime],
        adjustment: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
    ) -> date:
        """Roll a date onto a business day according to ``adjustment``."""
        if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
            return dt.date() if isinstance(dt, datetime) else dt
        try:
            convention = _QL_CONVENTIONS[adjustment]
        except KeyError as exc:
            raise ValueError(f"Unknown business day adjustment: {adjustment}") from exc
        return _to_py_date(self._ql_calendar.adjust(_to_ql_date(dt), convention))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Add business days to a date."""
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def business_days_between(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Count business days in (start, end]."""
        return self._ql_calendar.businessDaysBetween(
            _to_ql_date(start), _to_ql_date(end), False, True
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


TARGET = Calendar("TARGET", ql.TARGET())
WEEKEND_ONLY = Calendar("WEEKEND", ql.WeekendsOnly())
NULL_CALENDAR = Calendar("NULL", ql.NullCalendar())
US_GOVERNMENT_BOND = Calendar(
    "USGOVT", ql.UnitedStates(ql.UnitedStates.GovernmentBond)
)
UK_SETTLEMENT = Calendar("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))

CALENDARS: Dict[str, Calendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "WEEKEND": WEEKEND_ONLY,
    "NULL": NULL_CALENDAR,
    "USGOVT": US_GOVERNMENT_BOND,
    "UK": UK_SETTLEMENT,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name (case-insensitive)."""
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
