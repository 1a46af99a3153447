"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Tuple

from amortlib.conventions.calendars import Calendar
from amortlib.conventions.period import Period
from amortlib.conventions.types import BusinessDayAdjustment, DateGeneration


@dataclass(frozen=True)
class Schedule:
    """Ordered payment dates together with the rules that produced them."""

    dates: Tuple[date, ...]
    tenor: Period
    calendar: Calendar
    convention: BusinessDayAdjustment
    termination_convention: BusinessDayAdjustment
    rule: DateGeneration
    end_of_month: bool = False

    @property
    def start_date(self) -> date:
        return self.dates[0]

    @property
    def end_date(self) -> date:
        return self.dates[-1]

    @property
    def periods(self) -> Iterator[Tuple[date, date]]:
        """Consecutive (start, end) accrual date pairs."""
        return zip(self.dates[:-1], self.dates[1:])

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __getitem__(self, index: int) -> date:
        return self.dates[index]
