"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime
from typing import List, Optional
from fastapi.testclient import TestClient
from ledger_insights.api.main import create_app
from ledger_insights.api.dependencies import get_clock, get_ledger_client
from ledger_insights.domain.models import (
    Account,
    AccountPropensity,
    Transaction,
    TransactionType,
)


FIXED_NOW = datetime(2025, 2, 10, 12, 0, 0)


def make_transaction(
    id: str,
    on: date,
    amount: float,
    description: str = "Test",
    type: TransactionType = TransactionType.EXPENSE,
    category: str = "general",
    account_id: str = "acc_checking",
    installment_months: Optional[int] = None,
    is_interest_free: Optional[bool] = None,
) -> Transaction:
    return Transaction(
        id=id,
        date=on,
        description=description,
        amount=amount,
        type=type,
        category=category,
        account_id=account_id,
        installment_months=installment_months,
        is_interest_free=is_interest_free,
    )


class FakeLedgerClient:
    """In-memory stand-in for the ledger service"""

    def __init__(self, transactions: List[Transaction], accounts: Optional[List[Account]] = None):
        self.transactions = transactions
        self.accounts = accounts or []

    async def get_transactions(self) -> List[Transaction]:
        return list(self.transactions)

    async def get_accounts(self) -> List[Account]:
        return list(self.accounts)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_txn():
    """Transaction factory with sensible defaults"""
    return make_transaction


@pytest.fixture
def sample_accounts() -> List[Account]:
    return [
        Account(id="acc_checking", name="Main Checking", propensity=AccountPropensity.CHECKING),
        Account(id="acc_visa", name="Visa", propensity=AccountPropensity.CREDIT_CARD),
        Account(id="acc_master", name="Master", propensity=AccountPropensity.CREDIT_CARD),
    ]


@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Three months of ledger history ending just before FIXED_NOW"""
    return [
        # Monthly subscription
        make_transaction("netflix_dec", date(2024, 12, 5), 17000, "Netflix", category="subscriptions"),
        make_transaction("netflix_jan", date(2025, 1, 5), 17000, "Netflix", category="subscriptions"),
        make_transaction("netflix_feb", date(2025, 2, 5), 17000, " NETFLIX ", category="subscriptions"),
        # Dining baseline plus one spike
        make_transaction("dining_1", date(2024, 12, 20), 20000, "Bistro", category="dining"),
        make_transaction("dining_2", date(2025, 1, 15), 20000, "Cafe", category="dining"),
        make_transaction("dining_spike", date(2025, 2, 8), 80000, "Omakase", category="dining"),
        # Installment purchase on a card
        make_transaction(
            "laptop",
            date(2025, 1, 31),
            310500,
            "Laptop",
            category="electronics",
            account_id="acc_visa",
            installment_months=6,
        ),
        # Card spending
        make_transaction("groceries", date(2025, 2, 3), 45000, "Market", category="groceries", account_id="acc_master"),
        # Income never counts as an expense
        make_transaction(
            "salary",
            date(2025, 1, 25),
            3000000,
            "Salary",
            type=TransactionType.INCOME,
            category="income",
        ),
    ]


@pytest.fixture
def ledger_client(sample_transactions, sample_accounts) -> FakeLedgerClient:
    return FakeLedgerClient(sample_transactions, sample_accounts)


@pytest.fixture
def client(ledger_client: FakeLedgerClient) -> TestClient:
    """Create FastAPI test client with a fake ledger and a fixed clock"""
    app = create_app()

    app.dependency_overrides[get_ledger_client] = lambda: ledger_client
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    return TestClient(app)
