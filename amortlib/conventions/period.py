"""
Time periods and the approximate arithmetic used to compare them.

Periods expressed in different units (months vs. years vs. weeks) cannot be
compared by calendar arithmetic in isolation, so compatibility is decided by
bracketing both periods in days and testing a small window of integer
multiples for exact equality.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class UnsupportedUnitError(ValueError):
    """Raised when a time unit has no day-based representation."""


class TimeUnit(Enum):
    """Units a period length can be expressed in."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"
    HOURS = "H"
    MINUTES = "MIN"
    SECONDS = "S"


_DAY_FAMILY = (TimeUnit.DAYS, TimeUnit.WEEKS)
_MONTH_FAMILY = (TimeUnit.MONTHS, TimeUnit.YEARS)


@dataclass(frozen=True, eq=False)
class Period:
    """A (length, unit) pair such as 6M or 10Y."""

    length: int
    unit: TimeUnit

    def __post_init__(self):
        if not isinstance(self.unit, TimeUnit):
            object.__setattr__(self, "unit", TimeUnit(self.unit))
        if int(self.length) != self.length:
            raise ValueError(f"Period length must be a whole number, got {self.length!r}")
        object.__setattr__(self, "length", int(self.length))

    @classmethod
    def parse(cls, tenor: str) -> "Period":
        """Parse a tenor string (e.g., '3M', '2Y', '1W', '30D')."""
        t = tenor.upper().strip()
        units = {"D": TimeUnit.DAYS, "W": TimeUnit.WEEKS, "M": TimeUnit.MONTHS, "Y": TimeUnit.YEARS}
        if len(t) < 2 or t[-1] not in units:
            raise ValueError(f"Unsupported tenor: {tenor}")
        try:
            length = int(t[:-1])
        except ValueError as exc:
            raise ValueError(f"Unsupported tenor: {tenor}") from exc
        return cls(length, units[t[-1]])

    def normalized(self) -> "Period":
        """Express the period in its largest exact unit (12M -> 1Y, 14D -> 2W)."""
        if self.length == 0:
            return Period(0, TimeUnit.DAYS)
        if self.unit == TimeUnit.MONTHS and self.length % 12 == 0:
            return Period(self.length // 12, TimeUnit.YEARS)
        if self.unit == TimeUnit.DAYS and self.length % 7 == 0:
            return Period(self.length // 7, TimeUnit.WEEKS)
        return self

    def scaled(self, count: int) -> Optional["Period"]:
        """Return ``self * count``, or None when the result would be degenerate."""
        if count <= 0:
            return None
        return self * count

    def _canonical(self) -> Tuple[str, int]:
        if self.length == 0:
            return ("ZERO", 0)
        if self.unit in _DAY_FAMILY:
            return ("D", self.length * (7 if self.unit == TimeUnit.WEEKS else 1))
        if self.unit in _MONTH_FAMILY:
            return ("M", self.length * (12 if self.unit == TimeUnit.YEARS else 1))
        return (self.unit.value, self.length)

    def __mul__(self, n: int) -> "Period":
        if not isinstance(n, int):
            return NotImplemented
        return Period(self.length * n, self.unit)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._canonical() == other._canonical()

    def __hash__(self) -> int:
        return hash(self._canonical())

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"


def day_range(period: Period) -> Tuple[int, int]:
    """Return the (min, max) number of calendar days the period can span."""
    n = period.length
    if period.unit == TimeUnit.DAYS:
        return n, n
    if period.unit == TimeUnit.WEEKS:
        return 7 * n, 7 * n
    if period.unit == TimeUnit.MONTHS:
        return 28 * n, 31 * n
    if period.unit == TimeUnit.YEARS:
        return 365 * n, 366 * n
    raise UnsupportedUnitError(f"Unknown time unit: {period.unit}")


def is_sub_period(sub_period: Period, super_period: Period) -> Optional[int]:
    """Return how many times ``sub_period`` fits exactly into ``super_period``.

    Args:
        sub_period: The shorter period (e.g. a payment frequency).
        super_period: The longer period (e.g. a bond tenor).

    Returns:
        The integer count, or None when no integer multiple of the sub period
        equals the super period.
    """
    super_min, super_max = day_range(super_period)
    sub_min, sub_max = day_range(sub_period)
    if sub_min <= 0:
        logger.debug("Degenerate sub period %s; no count", sub_period)
        return None

    low = math.floor(super_min / sub_max)
    high = math.ceil(super_max / sub_min)
    logger.debug(
        "Searching %s in %s over candidate counts [%s, %s]",
        sub_period, super_period, low, high,
    )

    for count in range(low, high + 1):
        candidate = sub_period.scaled(count)
        if candidate is None:
            continue
        if candidate == super_period:
            return count
    return None
