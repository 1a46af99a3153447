"""
Main schedule generation logic.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Union

from amortlib import config
from amortlib.conventions.calendars import Calendar
from amortlib.conventions.period import Period
from amortlib.conventions.types import BusinessDayAdjustment, DateGeneration

from .adjustments import add_period
from .core import Schedule

logger = logging.getLogger(__name__)


class ScheduleGenerator:
    """Generates regular payment schedules with an optional stub period."""

    def __init__(
        self,
        calendar: Optional[Calendar] = None,
        convention: BusinessDayAdjustment = BusinessDayAdjustment.NO_ADJUSTMENT,
        termination_convention: BusinessDayAdjustment = BusinessDayAdjustment.NO_ADJUSTMENT,
        end_of_month: bool = False,
    ):
        self.calendar = calendar if calendar is not None else config.get_default_calendar()
        self.convention = convention
        self.termination_convention = termination_convention
        self.end_of_month = end_of_month

    def generate_schedule(
        self,
        effective_date: Union[date, datetime],
        termination_date: Union[date, datetime],
        tenor: Period,
        rule: DateGeneration = DateGeneration.BACKWARD,
    ) -> Schedule:
        """
        Generate a payment schedule.

        Args:
            effective_date: First accrual date (unadjusted)
            termination_date: Last accrual date (unadjusted)
            tenor: Spacing between regular dates
            rule: Roll backward from termination or forward from effective date

        Returns:
            Schedule holding the adjusted, de-duplicated dates
        """
        if isinstance(effective_date, datetime):
            effective_date = effective_date.date()
        if isinstance(termination_date, datetime):
            termination_date = termination_date.date()

        if effective_date >= termination_date:
            raise ValueError("Effective date must be before termination date")
        if tenor.length <= 0:
            raise ValueError(f"Schedule tenor must be positive, got {tenor}")

        if rule == DateGeneration.BACKWARD:
            unadjusted = self._generate_backward(effective_date, termination_date, tenor)
        elif rule == DateGeneration.FORWARD:
            unadjusted = self._generate_forward(effective_date, termination_date, tenor)
        else:
            raise ValueError(f"Unsupported date generation rule: {rule}")

        dates = self._adjust_dates(unadjusted)
        logger.debug(
            "Generated %s schedule %s -> %s every %s: %s dates",
            rule.value, effective_date, termination_date, tenor, len(dates),
        )
        return Schedule(
            dates=tuple(dates),
            tenor=tenor,
            calendar=self.calendar,
            convention=self.convention,
            termination_convention=self.termination_convention,
            rule=rule,
            end_of_month=self.end_of_month,
        )

    def _generate_backward(
        self, effective_date: date, termination_date: date, tenor: Period
    ) -> List[date]:
        """Roll from termination towards effective date; any stub is initial."""
        dates = [termination_date]
        periods = 1
        while True:
            # Offsets are multiples of the tenor from the anchor so days never drift
            current = add_period(termination_date, tenor * -periods, self.end_of_month)
            if current <= effective_date:
                break
            dates.append(current)
            periods += 1
        dates.append(effective_date)
        dates.reverse()
        return dates

    def _generate_forward(
        self, effective_date: date, termination_date: date, tenor: Period
    ) -> List[date]:
        """Roll from effective towards termination date; any stub is final."""
        dates = [effective_date]
        periods = 1
        while True:
            current = add_period(effective_date, tenor * periods, self.end_of_month)
            if current >= termination_date:
                break
            dates.append(current)
            periods += 1
        dates.append(termination_date)
        return dates

    def _adjust_dates(self, unadjusted: List[date]) -> List[date]:
        adjusted = [self.calendar.adjust(dt, self.convention) for dt in unadjusted[:-1]]
        adjusted.append(self.calendar.adjust(unadjusted[-1], self.termination_convention))

        dates: List[date] = []
        for dt in adjusted:
            if not dates or dt != dates[-1]:
                dates.append(dt)
        return dates


def make_schedule(
    effective_date: Union[date, datetime],
    termination_date: Union[date, datetime],
    tenor: Period,
    calendar: Optional[Calendar] = None,
    convention: BusinessDayAdjustment = BusinessDayAdjustment.NO_ADJUSTMENT,
    termination_convention: BusinessDayAdjustment = BusinessDayAdjustment.NO_ADJUSTMENT,
    rule: DateGeneration = DateGeneration.BACKWARD,
    end_of_month: bool = False,
) -> Schedule:
    """Build a schedule in one call."""
    generator = ScheduleGenerator(calendar, convention, termination_convention, end_of_month)
    return generator.generate_schedule(effective_date, termination_date, tenor, rule)
