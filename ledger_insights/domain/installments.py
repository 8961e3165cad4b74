"""Installment fee quoting and monthly payment projection"""

from datetime import datetime
from typing import Iterable, List, Optional

from ledger_insights.domain.exceptions import InvalidTransactionDataError
from ledger_insights.domain.models import (
    FeeQuote,
    Installment,
    InstallmentDue,
    InsightResult,
    Period,
    Transaction,
)
from ledger_insights.utils.date_utils import (
    D,
    DateLike,
    add_calendar_months,
    as_datetime,
    calendar_months_between,
)

SHORT_PLAN_MAX_MONTHS = 5
SHORT_PLAN_FEE_RATE = 0.025
LONG_PLAN_FEE_RATE = 0.035


def installment_fee_rate(total_months: int) -> float:
    """2.5% for plans up to 5 months, 3.5% beyond"""
    return SHORT_PLAN_FEE_RATE if total_months <= SHORT_PLAN_MAX_MONTHS else LONG_PLAN_FEE_RATE


def quote_installment_fee(
    principal: float,
    total_months: int,
    is_interest_free: bool = False,
) -> FeeQuote:
    """
    Compute the amount stored on an installment purchase at entry time.

    The fee is folded into the stored amount once, when the transaction is
    created; projections later divide that stored amount evenly and never
    look at the fee again.

    Example:
        300,000 over 6 months, not interest-free
        rate 0.035 -> fee 10,500 -> stored 310,500 -> 51,750.00 per month

    Raises:
        InvalidTransactionDataError: If total_months is not positive
    """
    if total_months <= 0:
        raise InvalidTransactionDataError(f"installment_months must be positive, got {total_months}")

    fee_rate = installment_fee_rate(total_months)
    fee = 0.0 if is_interest_free else principal * fee_rate
    stored_amount = principal + fee

    return FeeQuote(
        total_months=total_months,
        fee_rate=fee_rate,
        fee=fee,
        stored_amount=stored_amount,
        monthly_payment=stored_amount / total_months,
    )


def payment_schedule(start_date: D, total_months: int) -> List[D]:
    """All monthly payment dates, clamped to each month's last day"""
    return [add_calendar_months(start_date, k) for k in range(total_months)]


def remaining_months(start_date: DateLike, total_months: int, now: datetime) -> int:
    """
    Months left on a plan, by calendar month difference.

    Day of month is ignored on purpose: a plan started on the 31st counts one
    elapsed month on the 1st of the next month.
    """
    return total_months - calendar_months_between(start_date, now)


def is_installment(txn: Transaction) -> bool:
    return bool(txn.installment_months) and txn.installment_months > 1


def to_installment(txn: Transaction, now: datetime) -> Optional[Installment]:
    """Active installment for a transaction, or None once it is retired"""
    if not is_installment(txn):
        return None

    total_months = txn.installment_months
    remaining = remaining_months(txn.date, total_months, now)
    if remaining <= 0:
        return None

    return Installment(
        source_transaction_id=txn.id,
        description=txn.description,
        total_amount=txn.amount,
        monthly_payment=txn.amount / total_months,
        start_date=txn.date,
        total_months=total_months,
        remaining_months=remaining,
        account_id=txn.account_id,
    )


def active_installments(transactions: Iterable[Transaction], now: datetime) -> List[Installment]:
    """Every installment plan still running at `now`"""
    installments = []
    for txn in transactions:
        installment = to_installment(txn, now)
        if installment is not None:
            installments.append(installment)
    return installments


def first_payment_in_period(installment: Installment, period: Period) -> Optional[DateLike]:
    """
    First scheduled payment inside the period, if any.

    Payment dates only increase, so the scan stops at the first date past the
    period end.
    """
    start, end = as_datetime(period.start), as_datetime(period.end)
    for k in range(installment.total_months):
        payment_date = add_calendar_months(installment.start_date, k)
        moment = as_datetime(payment_date)
        if start <= moment <= end:
            return payment_date
        if moment > end:
            break
    return None


def installments_due(
    transactions: Iterable[Transaction],
    period: Period,
    now: datetime,
) -> InsightResult[InstallmentDue]:
    """
    Installment payments falling in the period, at most one per plan.

    Retired plans (no remaining months at `now`) are excluded even if their
    schedule would still land in the period.
    """
    due = []
    for installment in active_installments(transactions, now):
        payment_date = first_payment_in_period(installment, period)
        if payment_date is None:
            continue
        due.append(
            InstallmentDue(
                source_id=installment.source_transaction_id,
                description=installment.description,
                payment_date=payment_date,
                monthly_payment=installment.monthly_payment,
                remaining_months=installment.remaining_months,
                account_id=installment.account_id,
            )
        )

    due.sort(key=lambda item: as_datetime(item.payment_date))
    return InsightResult(items=due, total=sum(item.monthly_payment for item in due))
