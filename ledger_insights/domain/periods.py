"""Period resolution for month and week views"""

from datetime import datetime, timedelta
from typing import Optional

from ledger_insights.domain.models import Period, PeriodMode, WeekStart
from ledger_insights.utils.date_utils import as_datetime, days_in_month, end_of_day, start_of_day


def month_period(year: int, month: int) -> Period:
    """Day 1 00:00 through the last instant of the month's last day"""
    start = datetime(year, month, 1)
    end = end_of_day(datetime(year, month, days_in_month(year, month)))
    return Period(start=start, end=end)


def week_period(now: datetime, week_start: WeekStart = WeekStart.MON) -> Period:
    """Seven days starting at the latest `week_start` weekday at or before now"""
    now = as_datetime(now)
    if week_start == WeekStart.SUN:
        offset = (now.weekday() + 1) % 7
    else:
        offset = now.weekday()
    start = start_of_day(now - timedelta(days=offset))
    return Period(start=start, end=end_of_day(start + timedelta(days=6)))


def resolve_period(
    mode: PeriodMode,
    *,
    now: datetime,
    year: Optional[int] = None,
    month: Optional[int] = None,
    week_start: WeekStart = WeekStart.MON,
) -> Period:
    """
    Resolve the caller's active period.

    Month mode uses (year, month), falling back to now's month for whichever
    is missing. Week mode only looks at now and the week-start convention.
    """
    now = as_datetime(now)
    if mode == PeriodMode.WEEK:
        return week_period(now, week_start)
    return month_period(year or now.year, month or now.month)
