"""Monthly credit card bill aggregation"""

from collections import defaultdict
from typing import Dict, Iterable

from ledger_insights.domain.models import (
    Account,
    AccountType,
    CardBill,
    InsightResult,
    Transaction,
    TransactionType,
)
from ledger_insights.domain.periods import month_period
from ledger_insights.utils.date_utils import is_within_range


def card_bills(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
    year: int,
    month: int,
) -> InsightResult[CardBill]:
    """Expenses charged to credit card accounts during the month, per account"""
    accounts_by_id = {account.id: account for account in accounts}
    card_ids = {
        account_id
        for account_id, account in accounts_by_id.items()
        if account.effective_type == AccountType.CREDIT
    }
    period = month_period(year, month)

    per_account: Dict[str, float] = defaultdict(float)
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE or txn.account_id not in card_ids:
            continue
        if is_within_range(txn.date, period.start, period.end):
            per_account[txn.account_id] += txn.amount

    bills = [
        CardBill(
            account_id=account_id,
            account_name=accounts_by_id[account_id].name or account_id,
            amount=amount,
        )
        for account_id, amount in per_account.items()
    ]
    bills.sort(key=lambda bill: bill.amount, reverse=True)

    return InsightResult(items=bills, total=sum(bill.amount for bill in bills))
