from datetime import date, datetime
from typing import Union

from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, Timestamp, str]


def to_date(date_like: DateLike) -> date:
    """
    Normalize a date-like value to a plain ``date``.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)
