"""GET /v1/recurring - Recurring charges in the selected period"""

import time
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from ledger_insights.api.dependencies import get_ledger_client, get_now, get_period, get_request_id
from ledger_insights.api.v1.ledger_data import load_transactions
from ledger_insights.api.v1.schemas import PeriodSchema, RecurringResponse, TransactionSchema
from ledger_insights.config import settings
from ledger_insights.domain.models import Period
from ledger_insights.domain.recurring import detect_recurring
from ledger_insights.infrastructure.clients.ledger import LedgerClient
from ledger_insights.infrastructure.observability.logging import log_insight
from ledger_insights.infrastructure.observability.metrics import record_insight

router = APIRouter()


@router.get("/recurring", response_model=RecurringResponse)
async def get_recurring(
    request: Request,
    period: Period = Depends(get_period),
    now: datetime = Depends(get_now),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    Transactions in the period whose description repeats in the trailing window.

    Newest first.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    transactions = await load_transactions(ledger_client, request_id)
    result = detect_recurring(
        transactions,
        period,
        now,
        window_days=settings.recurring_window_days,
        min_occurrences=settings.recurring_min_occurrences,
    )

    record_insight("recurring", len(result.items))
    log_insight(request_id, "recurring", len(result.items), result.total, (time.time() - start_time) * 1000)

    return RecurringResponse(
        period=PeriodSchema.model_validate(period),
        items=[TransactionSchema.model_validate(txn) for txn in result.items],
        total=result.total,
    )
