from .date import DateLike, datetime_to_str, to_date

__all__ = ["DateLike", "datetime_to_str", "to_date"]
