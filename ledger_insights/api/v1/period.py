"""GET /v1/period - Resolve the active period"""

from fastapi import APIRouter, Depends

from ledger_insights.api.dependencies import get_period
from ledger_insights.api.v1.schemas import PeriodSchema
from ledger_insights.domain.models import Period

router = APIRouter()


@router.get("/period", response_model=PeriodSchema)
def get_active_period(period: Period = Depends(get_period)):
    """Inclusive bounds of the requested month or week"""
    return PeriodSchema.model_validate(period)
