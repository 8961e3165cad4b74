"""Recurring charge detection by repeated descriptions"""

from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Set

from ledger_insights.domain.models import InsightResult, Period, Transaction
from ledger_insights.utils.date_utils import as_datetime, is_within_range, trailing_window_start

DEFAULT_WINDOW_DAYS = 90
DEFAULT_MIN_OCCURRENCES = 2


def description_key(description: str) -> str:
    return (description or "").strip().lower()


def recurring_keys(
    transactions: Iterable[Transaction],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
    min_occurrences: int = DEFAULT_MIN_OCCURRENCES,
) -> Set[str]:
    """
    Normalized descriptions seen at least `min_occurrences` times in the
    trailing window.

    Two hits in 90 days is enough to catch both weekly and monthly cycles;
    no interval regularity is checked. A single hit never qualifies.
    """
    window_start = trailing_window_start(now, window_days)
    groups: Dict[str, List[Transaction]] = defaultdict(list)

    for txn in transactions:
        if not is_within_range(txn.date, window_start, now):
            continue
        key = description_key(txn.description)
        if not key:
            continue
        groups[key].append(txn)

    threshold = max(min_occurrences, 2)
    return {key for key, members in groups.items() if len(members) >= threshold}


def detect_recurring(
    transactions: Iterable[Transaction],
    period: Period,
    now: datetime,
    *,
    window_days: int = DEFAULT_WINDOW_DAYS,
    min_occurrences: int = DEFAULT_MIN_OCCURRENCES,
) -> InsightResult[Transaction]:
    """
    Recurring charges that occur inside the period.

    Recurrence is established from the trailing window ending at `now`; the
    period is only used to pick which occurrences to report, and may lie
    entirely outside that window.
    """
    transactions = list(transactions)
    keys = recurring_keys(transactions, now, window_days, min_occurrences)

    items = [
        txn
        for txn in transactions
        if description_key(txn.description) in keys and is_within_range(txn.date, period.start, period.end)
    ]
    items.sort(key=lambda txn: as_datetime(txn.date), reverse=True)

    return InsightResult(items=items, total=sum(txn.amount for txn in items))
