"""Domain models - pure Python dataclasses representing ledger records and derived views"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from ledger_insights.utils.date_utils import DateLike

T = TypeVar("T")


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"
    OPENING = "OPENING"


class AccountPropensity(str, Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"
    CREDIT_CARD = "Credit Card"
    INVESTMENT = "Investment"
    CASH = "Cash"
    LOAN = "Loan"


class AccountType(str, Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
    CASH = "CASH"
    LIABILITY = "LIABILITY"


class PeriodMode(str, Enum):
    MONTH = "month"
    WEEK = "week"


class WeekStart(str, Enum):
    MON = "mon"
    SUN = "sun"


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction as read from the external ledger (never mutated)"""

    id: str
    date: DateLike
    description: str
    amount: float  # >= 0, installment fee already folded in
    type: TransactionType
    category: str
    account_id: str
    installment_months: Optional[int] = None
    is_interest_free: Optional[bool] = None


@dataclass(frozen=True)
class Account:
    """Ledger account; only what the card bill view needs"""

    id: str
    name: str
    propensity: AccountPropensity
    type: Optional[AccountType] = None

    @property
    def effective_type(self) -> AccountType:
        """Explicit type wins; otherwise inferred from the propensity"""
        if self.type is not None:
            return self.type
        return _PROPENSITY_TYPES.get(self.propensity, AccountType.DEBIT)


_PROPENSITY_TYPES = {
    AccountPropensity.CASH: AccountType.CASH,
    AccountPropensity.CREDIT_CARD: AccountType.CREDIT,
    AccountPropensity.LOAN: AccountType.LIABILITY,
}


@dataclass(frozen=True)
class Period:
    """Inclusive date window"""

    start: datetime
    end: datetime


@dataclass
class Installment:
    """Active installment plan derived from an installment-flagged transaction"""

    source_transaction_id: str
    description: str
    total_amount: float
    monthly_payment: float
    start_date: DateLike
    total_months: int
    remaining_months: int
    account_id: str

    @property
    def paid_months(self) -> int:
        return self.total_months - self.remaining_months

    @property
    def progress(self) -> float:
        """Share of the plan already elapsed, 0.0 - 1.0"""
        return self.paid_months / self.total_months


@dataclass
class InstallmentDue:
    """One projected monthly payment of an installment inside a period"""

    source_id: str
    description: str
    payment_date: DateLike
    monthly_payment: float
    remaining_months: int
    account_id: str


@dataclass
class FeeQuote:
    """Entry-time installment fee breakdown"""

    total_months: int
    fee_rate: float
    fee: float
    stored_amount: float
    monthly_payment: float


@dataclass
class CardBill:
    """Month's credit card spending for one account"""

    account_id: str
    account_name: str
    amount: float


@dataclass
class InsightResult(Generic[T]):
    """Ordered view records plus their scalar total"""

    items: List[T] = field(default_factory=list)
    total: float = 0.0
