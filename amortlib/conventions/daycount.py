"""
QuantLib-backed day count conventions used to accrue coupons.
"""

from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

from .calendars import _to_ql_date


class DayCountConvention:
    """Named accrual convention delegating to a QuantLib day counter."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> float:
        """Accrual fraction between two dates."""
        return self._ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    def day_count(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DayCountConvention):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"DayCountConvention({self.name!r})"

    def __str__(self) -> str:
        return self.name


ACT_360 = DayCountConvention("ACT/360", ql.Actual360())
ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
THIRTY_360E = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))
# Bond basis is the US corporate 30/360
THIRTY_360U = DayCountConvention("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))
ACT_ACT = DayCountConvention("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))
ACT_ACT_AFB = DayCountConvention("ACT/ACT AFB", ql.ActualActual(ql.ActualActual.AFB))

_ALIASES = {
    ACT_360: ("ACT/360", "ACTUAL/360"),
    ACT_365F: ("ACT/365F", "ACT/365", "ACTUAL/365F"),
    THIRTY_360E: ("30E/360", "30/360E", "30/360 EUROPEAN"),
    THIRTY_360U: ("30U/360", "30/360", "30/360 US", "30/360 BOND BASIS"),
    ACT_ACT: ("ACT/ACT", "ACTUAL/ACTUAL", "ACT/ACT ISDA"),
    ACT_ACT_AFB: ("ACT/ACT AFB", "ACTUAL/ACTUAL AFB"),
}

DAY_COUNT_CONVENTIONS: Dict[str, DayCountConvention] = {
    alias: convention
    for convention, aliases in _ALIASES.items()
    for alias in aliases
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
