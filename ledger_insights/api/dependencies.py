"""Dependency injection for FastAPI endpoints"""

from datetime import datetime
from typing import Optional

from fastapi import Depends, Query, Request
from ledger_insights.config import settings
from ledger_insights.domain.models import Period, PeriodMode, WeekStart
from ledger_insights.domain.periods import resolve_period
from ledger_insights.infrastructure.clients.ledger import LedgerClient
from ledger_insights.utils.date_utils import Clock, system_clock


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger_client() -> LedgerClient:
    """Provide Ledger API client instance"""
    return LedgerClient()


def get_clock() -> Clock:
    """Provide the "now" source; tests override this with a fixed clock"""
    return system_clock


def get_now(clock: Clock = Depends(get_clock)) -> datetime:
    return clock()


def get_period(
    mode: PeriodMode = Query(PeriodMode.MONTH, description="Period granularity"),
    year: Optional[int] = Query(None, ge=1, le=9999, description="Year for month mode"),
    month: Optional[int] = Query(None, ge=1, le=12, description="Month (1-12) for month mode"),
    week_start: WeekStart = Query(settings.week_start, description="First day of the week"),
    now: datetime = Depends(get_now),
) -> Period:
    """Resolve the active period from query parameters"""
    return resolve_period(mode, now=now, year=year, month=month, week_start=week_start)
