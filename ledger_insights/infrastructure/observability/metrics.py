"""Prometheus metrics for insight volume, flagged items and ledger availability"""

from prometheus_client import Counter, Histogram

# Insight metrics
insight_counter = Counter(
    "ledger_insight_requests_total",
    "Total insights computed",
    ["insight"],  # installments_due | recurring | outliers | card_bills | ...
)

flagged_items_counter = Counter(
    "ledger_insight_flagged_items_total",
    "Items returned by insight computations",
    ["insight"],
)

# Ledger API metrics
ledger_fetch_failures_counter = Counter(
    "ledger_fetch_failures_total",
    "Failed ledger API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_insight(insight: str, item_count: int) -> None:
    """Record one computed insight and how many items it returned"""
    insight_counter.labels(insight=insight).inc()
    flagged_items_counter.labels(insight=insight).inc(item_count)
