# Re-export schedule components
from amortlib.conventions.types import BusinessDayAdjustment, DateGeneration

from .adjustments import add_period, get_month_end, is_end_of_month
from .core import Schedule
from .generator import ScheduleGenerator, make_schedule
