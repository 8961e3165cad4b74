"""Unit tests for category-relative outlier detection"""

from datetime import date, datetime, timezone
from ledger_insights.domain.models import TransactionType
from ledger_insights.domain.outliers import FALLBACK_CATEGORY, category_baselines, detect_outliers
from ledger_insights.domain.periods import month_period


def _dining_history(make_txn):
    return [
        make_txn("d1", date(2025, 1, 10), 20000, "Lunch", category="dining"),
        make_txn("d2", date(2025, 1, 20), 20000, "Dinner", category="dining"),
    ]


def test_flags_expense_at_twice_the_baseline(make_txn, now):
    """Dining averages 20,000; 45,000 is flagged, 35,000 is not"""
    transactions = _dining_history(make_txn) + [
        make_txn("big", date(2025, 2, 20), 45000, "Tasting menu", category="dining"),
        make_txn("medium", date(2025, 2, 21), 35000, "Brunch", category="dining"),
    ]

    result = detect_outliers(transactions, month_period(2025, 2), now, factor=2.0)

    assert category_baselines(transactions, now) == {"dining": 20000}
    assert [txn.id for txn in result.items] == ["big"]
    assert result.total == 45000


def test_threshold_is_inclusive(make_txn, now):
    transactions = _dining_history(make_txn) + [
        make_txn("exact", date(2025, 2, 20), 40000, "Dinner party", category="dining"),
    ]

    result = detect_outliers(transactions, month_period(2025, 2), now)

    assert [txn.id for txn in result.items] == ["exact"]


def test_category_without_baseline_is_never_flagged(make_txn, now):
    transactions = _dining_history(make_txn) + [
        make_txn("first_trip", date(2025, 2, 20), 900000, "Flight", category="travel"),
    ]

    result = detect_outliers(transactions, month_period(2025, 2), now)

    assert result.items == []
    assert "travel" not in category_baselines(transactions, now)


def test_only_expenses_are_considered(make_txn, now):
    transactions = _dining_history(make_txn) + [
        make_txn("refund", date(2025, 2, 20), 90000, "Refund", type=TransactionType.INCOME, category="dining"),
        make_txn("move", date(2025, 2, 20), 90000, "Move", type=TransactionType.TRANSFER, category="dining"),
    ]

    assert detect_outliers(transactions, month_period(2025, 2), now).items == []
    assert category_baselines(transactions, now) == {"dining": 20000}


def test_baseline_ignores_expenses_outside_window(make_txn, now):
    transactions = _dining_history(make_txn) + [
        make_txn("ancient", date(2024, 9, 1), 500000, "Wedding dinner", category="dining"),
    ]

    assert category_baselines(transactions, now) == {"dining": 20000}
    assert category_baselines(transactions, now, window_days=200)["dining"] == 180000


def test_past_spike_suppresses_detection(make_txn, now):
    """The untrimmed mean lets one large expense raise the bar"""
    transactions = _dining_history(make_txn) + [
        make_txn("spike", date(2025, 1, 30), 200000, "Banquet", category="dining"),
        make_txn("later", date(2025, 2, 20), 60000, "Dinner", category="dining"),
    ]

    result = detect_outliers(transactions, month_period(2025, 2), now)

    assert result.items == []


def test_empty_category_uses_fallback(make_txn, now):
    transactions = [
        make_txn("a", date(2025, 1, 10), 10000, "Misc", category=""),
        make_txn("b", date(2025, 2, 20), 25000, "Misc", category=""),
    ]

    assert category_baselines(transactions, now) == {FALLBACK_CATEGORY: 10000}
    assert [txn.id for txn in detect_outliers(transactions, month_period(2025, 2), now).items] == ["b"]


def test_sample_history(sample_transactions, now):
    """Dining spike reaches exactly twice its own inflated baseline"""
    result = detect_outliers(sample_transactions, month_period(2025, 2), now)

    assert [txn.id for txn in result.items] == ["dining_spike"]
    assert result.total == 80000


def test_sorted_by_amount_descending(make_txn, now):
    transactions = _dining_history(make_txn) + [
        make_txn("x", date(2025, 2, 18), 50000, "X", category="dining"),
        make_txn("y", date(2025, 2, 19), 90000, "Y", category="dining"),
        make_txn("z", date(2025, 2, 17), 70000, "Z", category="dining"),
    ]

    result = detect_outliers(transactions, month_period(2025, 2), now)

    assert [txn.id for txn in result.items] == ["y", "z", "x"]
    assert result.total == 210000


def test_higher_factor_never_adds_items(sample_transactions, make_txn, now):
    transactions = sample_transactions + _dining_history(make_txn) + [
        make_txn("x", date(2025, 2, 18), 50000, "X", category="dining"),
        make_txn("y", date(2025, 2, 19), 150000, "Y", category="dining"),
    ]
    period = month_period(2025, 2)

    at_two = {txn.id for txn in detect_outliers(transactions, period, now, factor=2.0).items}
    at_three = {txn.id for txn in detect_outliers(transactions, period, now, factor=3.0).items}

    assert at_three <= at_two


def test_detect_outliers_is_idempotent(sample_transactions, now):
    period = month_period(2025, 2)

    assert detect_outliers(sample_transactions, period, now) == detect_outliers(sample_transactions, period, now)


def test_aware_clock_matches_local_clock(make_txn):
    aware_now = datetime(2025, 2, 10, 12, tzinfo=timezone.utc)
    local_now = aware_now.astimezone().replace(tzinfo=None)
    transactions = _dining_history(make_txn) + [
        make_txn("big", date(2025, 2, 20), 45000, "Tasting menu", category="dining"),
    ]
    period = month_period(2025, 2)

    result = detect_outliers(transactions, period, aware_now)

    assert result == detect_outliers(transactions, period, local_now)
    assert [txn.id for txn in result.items] == ["big"]
