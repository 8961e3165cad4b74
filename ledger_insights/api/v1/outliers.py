"""GET /v1/outliers - Abnormally large expenses in the selected period"""

import time
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ledger_insights.api.dependencies import get_ledger_client, get_now, get_period, get_request_id
from ledger_insights.api.v1.ledger_data import load_transactions
from ledger_insights.api.v1.schemas import OutliersResponse, PeriodSchema, TransactionSchema
from ledger_insights.config import settings
from ledger_insights.domain.models import Period
from ledger_insights.domain.outliers import detect_outliers
from ledger_insights.infrastructure.clients.ledger import LedgerClient
from ledger_insights.infrastructure.observability.logging import log_insight
from ledger_insights.infrastructure.observability.metrics import record_insight

router = APIRouter()


@router.get("/outliers", response_model=OutliersResponse)
async def get_outliers(
    request: Request,
    factor: Optional[float] = Query(None, gt=0, description="Multiple of the category baseline to flag"),
    period: Period = Depends(get_period),
    now: datetime = Depends(get_now),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    Expenses in the period at or above `factor` times their category's
    trailing average. Largest first.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    factor = factor if factor is not None else settings.outlier_factor

    transactions = await load_transactions(ledger_client, request_id)
    result = detect_outliers(
        transactions,
        period,
        now,
        factor=factor,
        window_days=settings.outlier_window_days,
    )

    record_insight("outliers", len(result.items))
    log_insight(request_id, "outliers", len(result.items), result.total, (time.time() - start_time) * 1000)

    return OutliersResponse(
        period=PeriodSchema.model_validate(period),
        factor=factor,
        items=[TransactionSchema.model_validate(txn) for txn in result.items],
        total=result.total,
    )
