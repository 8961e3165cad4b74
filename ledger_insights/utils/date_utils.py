"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Callable, TypeVar, Union

DateLike = Union[date, datetime]
D = TypeVar("D", date, datetime)

# Injected "now" source so every computation is replayable
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Wall-clock time (local, naive)"""
    return datetime.now()


def as_datetime(value: DateLike) -> datetime:
    """
    Normalize to a naive local datetime.

    Calendar dates become midnight; aware datetimes are converted to local
    time and stripped of their offset so they compare with ledger dates.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(as_datetime(value).date(), time.min)


def end_of_day(value: DateLike) -> datetime:
    """Last representable instant of the calendar day"""
    return datetime.combine(as_datetime(value).date(), time.max)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_calendar_months(value: D, months: int) -> D:
    """
    Shift a date by whole calendar months, keeping the day of month.

    If the target month is shorter the day clamps to its last day, so
    Jan 31 + 1 month is Feb 28 (or 29), never a day in March.
    Time of day is preserved for datetimes.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, days_in_month(year, month))
    return value.replace(year=year, month=month, day=day)


def calendar_months_between(start: DateLike, end: DateLike) -> int:
    """Difference in calendar months, ignoring the day of month"""
    start, end = as_datetime(start), as_datetime(end)
    return (end.year - start.year) * 12 + (end.month - start.month)


def trailing_window_start(now: datetime, days: int) -> datetime:
    """Midnight of the day `days` days before now"""
    return start_of_day(now - timedelta(days=days))


def is_within_range(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive range check that tolerates mixing dates and datetimes"""
    moment = as_datetime(value)
    return as_datetime(start) <= moment <= as_datetime(end)
