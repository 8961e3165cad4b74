"""Installment endpoints: active plans, dues in a period, entry-time fee quote"""

import time
from datetime import datetime

from fastapi import APIRouter, Depends, Request

from ledger_insights.api.dependencies import get_ledger_client, get_now, get_period, get_request_id
from ledger_insights.api.v1.ledger_data import load_transactions
from ledger_insights.api.v1.schemas import (
    ActiveInstallmentsResponse,
    FeeQuoteRequest,
    FeeQuoteResponse,
    InstallmentDueSchema,
    InstallmentSchema,
    InstallmentsDueResponse,
    PeriodSchema,
)
from ledger_insights.domain.installments import active_installments, installments_due, quote_installment_fee
from ledger_insights.domain.models import Period
from ledger_insights.infrastructure.clients.ledger import LedgerClient
from ledger_insights.infrastructure.observability.logging import log_insight
from ledger_insights.infrastructure.observability.metrics import record_insight

router = APIRouter()


@router.get("/installments/active", response_model=ActiveInstallmentsResponse)
async def get_active_installments(
    request: Request,
    now: datetime = Depends(get_now),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    List installment plans that still have months remaining.

    Plans disappear from this list once fully paid, even though their source
    transaction stays in the ledger.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    transactions = await load_transactions(ledger_client, request_id)
    installments = active_installments(transactions, now)
    total = sum(inst.monthly_payment for inst in installments)

    record_insight("installments_active", len(installments))
    log_insight(request_id, "installments_active", len(installments), total, (time.time() - start_time) * 1000)

    return ActiveInstallmentsResponse(
        installments=[InstallmentSchema.model_validate(inst) for inst in installments],
        total_monthly_payment=total,
    )


@router.get("/installments/due", response_model=InstallmentsDueResponse)
async def get_installments_due(
    request: Request,
    period: Period = Depends(get_period),
    now: datetime = Depends(get_now),
    ledger_client: LedgerClient = Depends(get_ledger_client),
):
    """
    Installment payments due in the selected period.

    Returns at most one payment per plan, ordered by payment date.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    transactions = await load_transactions(ledger_client, request_id)
    result = installments_due(transactions, period, now)

    record_insight("installments_due", len(result.items))
    log_insight(request_id, "installments_due", len(result.items), result.total, (time.time() - start_time) * 1000)

    return InstallmentsDueResponse(
        period=PeriodSchema.model_validate(period),
        items=[InstallmentDueSchema.model_validate(item) for item in result.items],
        total=result.total,
    )


@router.post("/installments/quote", response_model=FeeQuoteResponse)
def quote_installment(request_body: FeeQuoteRequest):
    """Fee and monthly payment for an installment purchase before it is recorded"""
    quote = quote_installment_fee(
        request_body.principal,
        request_body.installment_months,
        request_body.is_interest_free,
    )
    return FeeQuoteResponse.model_validate(quote)
