"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from ledger_insights.domain.models import TransactionType

DateValue = Union[datetime, date]


class PeriodSchema(BaseModel):
    """Inclusive period bounds"""

    model_config = ConfigDict(from_attributes=True)

    start: datetime
    end: datetime


class TransactionSchema(BaseModel):
    """Ledger transaction as reported back to the consumer"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: DateValue
    description: str
    amount: float
    type: TransactionType
    category: str
    account_id: str


class InstallmentSchema(BaseModel):
    """Active installment plan"""

    model_config = ConfigDict(from_attributes=True)

    source_transaction_id: str
    description: str
    total_amount: float
    monthly_payment: float
    start_date: DateValue
    total_months: int
    remaining_months: int
    paid_months: int
    progress: float
    account_id: str


class ActiveInstallmentsResponse(BaseModel):
    """Response for GET /v1/installments/active"""

    installments: List[InstallmentSchema]
    total_monthly_payment: float


class InstallmentDueSchema(BaseModel):
    """Single installment payment inside a period"""

    model_config = ConfigDict(from_attributes=True)

    source_id: str
    description: str
    payment_date: DateValue
    monthly_payment: float
    remaining_months: int
    account_id: str


class InstallmentsDueResponse(BaseModel):
    """Response for GET /v1/installments/due"""

    period: PeriodSchema
    items: List[InstallmentDueSchema]
    total: float


class FeeQuoteRequest(BaseModel):
    """Request body for POST /v1/installments/quote"""

    principal: float = Field(..., ge=0, description="Purchase amount before fees")
    installment_months: int = Field(..., ge=1, description="Number of monthly payments")
    is_interest_free: bool = Field(False, description="Waives the installment fee")


class FeeQuoteResponse(BaseModel):
    """Response for POST /v1/installments/quote"""

    model_config = ConfigDict(from_attributes=True)

    total_months: int
    fee_rate: float
    fee: float
    stored_amount: float
    monthly_payment: float


class RecurringResponse(BaseModel):
    """Response for GET /v1/recurring"""

    period: PeriodSchema
    items: List[TransactionSchema]
    total: float


class OutliersResponse(BaseModel):
    """Response for GET /v1/outliers"""

    period: PeriodSchema
    factor: float
    items: List[TransactionSchema]
    total: float


class CardBillSchema(BaseModel):
    """Month's spending on one credit card account"""

    model_config = ConfigDict(from_attributes=True)

    account_id: str
    account_name: str
    amount: float


class CardBillsResponse(BaseModel):
    """Response for GET /v1/card-bills"""

    year: int
    month: int
    items: List[CardBillSchema]
    total: float
