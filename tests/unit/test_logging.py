"""Unit tests for structured JSON log records"""

import json
import logging
from ledger_insights.config import settings
from ledger_insights.infrastructure.observability.logging import CustomJsonFormatter


def _format(message: str, **extra) -> dict:
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("ledger_insights", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(formatter.format(record))


def test_service_name_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "service_name", "insights-test")

    entry = _format("Insight computed", request_id="req-1")

    assert entry["service"] == "insights-test"
    assert entry["level"] == "INFO"
    assert entry["message"] == "Insight computed"
    assert entry["request_id"] == "req-1"
