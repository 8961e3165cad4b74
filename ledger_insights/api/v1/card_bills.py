"""GET /v1/card-bills - Credit card spending for a month"""

import time
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ledger_insights.api.dependencies import get_ledger_client, get_now, get_request_id
from ledger_insights.api.v1.ledger_data import load_accounts, load_transactions
from ledger_insights.api.v1.schemas import CardBillSchema, CardBillsResponse
from ledger_insights.domain.card_bills import card_bills
from ledger_insights.infrastructure.clients.ledger import LedgerClient
from ledger_insights.infrastructure.observability.logging import log_insight
from ledger_insights.infrastructure.observability.metrics import record_insight

router = APIRouter()


@router.get("/card-bills", response_model=CardBillsResponse)
async def get_card_bills(
    request: Request,
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    now: datetime = Depends(get_now),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """Month's expenses on credit card accounts, biggest account first"""
    start_time = time.time()
    request_id = get_request_id(request)
    year = year or now.year
    month = month or now.month

    transactions = await load_transactions(ledger_client, request_id)
    accounts = await load_accounts(ledger_client, request_id)
    result = card_bills(transactions, accounts, year, month)

    record_insight("card_bills", len(result.items))
    log_insight(request_id, "card_bills", len(result.items), result.total, (time.time() - start_time) * 1000)

    return CardBillsResponse(
        year=year,
        month=month,
        items=[CardBillSchema.model_validate(bill) for bill in result.items],
        total=result.total,
    )
