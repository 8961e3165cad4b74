"""Category-relative outlier detection for expenses"""

from datetime import datetime
from typing import Dict, Iterable, Tuple

from ledger_insights.domain.models import InsightResult, Period, Transaction, TransactionType
from ledger_insights.utils.date_utils import is_within_range, trailing_window_start

DEFAULT_FACTOR = 2.0
DEFAULT_WINDOW_DAYS = 90
FALLBACK_CATEGORY = "기타"


def category_key(txn: Transaction) -> str:
    return txn.category or FALLBACK_CATEGORY


def category_baselines(
    transactions: Iterable[Transaction],
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> Dict[str, float]:
    """
    Mean expense amount per category over the trailing window.

    Categories with no expenses in the window are absent, so they never have
    a baseline. Historical spikes are not trimmed.
    """
    window_start = trailing_window_start(now, window_days)
    sums: Dict[str, Tuple[float, int]] = {}

    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        if not is_within_range(txn.date, window_start, now):
            continue
        key = category_key(txn)
        total, count = sums.get(key, (0.0, 0))
        sums[key] = (total + txn.amount, count + 1)

    return {key: total / count for key, (total, count) in sums.items() if count > 0}


def detect_outliers(
    transactions: Iterable[Transaction],
    period: Period,
    now: datetime,
    *,
    factor: float = DEFAULT_FACTOR,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> InsightResult[Transaction]:
    """
    Period expenses at least `factor` times their category's baseline.

    The baseline window always ends at `now`, whatever period is queried.
    """
    transactions = list(transactions)
    baselines = category_baselines(transactions, now, window_days)

    flagged = []
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE:
            continue
        if not is_within_range(txn.date, period.start, period.end):
            continue
        baseline = baselines.get(category_key(txn), 0.0)
        if baseline > 0 and txn.amount >= factor * baseline:
            flagged.append(txn)

    flagged.sort(key=lambda txn: txn.amount, reverse=True)
    return InsightResult(items=flagged, total=sum(txn.amount for txn in flagged))
