from .calendars import CALENDARS, Calendar, get_calendar
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)
from .period import Period, TimeUnit, UnsupportedUnitError, day_range, is_sub_period
from .types import BusinessDayAdjustment, DateGeneration, Frequency
