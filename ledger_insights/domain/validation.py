"""Boundary validation: raw ledger payloads into domain records"""

import math
from datetime import date, datetime
from typing import Any, Dict, Optional

from ledger_insights.domain.exceptions import InvalidTransactionDataError
from ledger_insights.domain.models import (
    Account,
    AccountPropensity,
    AccountType,
    Transaction,
    TransactionType,
)
from ledger_insights.utils.date_utils import DateLike, as_datetime


def _field(payload: Dict[str, Any], *names: str, required: bool = True) -> Any:
    """First present field among the wire name and its snake_case alias"""
    for name in names:
        if name in payload and payload[name] is not None:
            return payload[name]
    if required:
        raise InvalidTransactionDataError(f"Missing field: {names[0]}")
    return None


def parse_date(value: Any) -> DateLike:
    """
    Parse a ledger date.

    Plain `YYYY-MM-DD` strings become dates, anything longer must be an ISO
    datetime. Aware datetimes are converted to naive local time so they
    compare against the local clock.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidTransactionDataError(f"Unparseable date: {value!r}") from e
    else:
        raise InvalidTransactionDataError(f"Unparseable date: {value!r}")

    return as_datetime(parsed)


def parse_amount(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidTransactionDataError(f"Invalid amount: {value!r}")
    try:
        amount = float(value)
    except ValueError as e:
        raise InvalidTransactionDataError(f"Invalid amount: {value!r}") from e
    if not math.isfinite(amount):
        raise InvalidTransactionDataError(f"Amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidTransactionDataError(f"Amount must not be negative, got {amount}")
    return amount


def parse_installment_months(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTransactionDataError(f"installment_months must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidTransactionDataError(f"installment_months must be positive, got {value}")
    return value


def parse_flag(value: Any, name: str) -> Optional[bool]:
    """Optional JSON boolean; strings such as "false" are rejected"""
    if value is None or isinstance(value, bool):
        return value
    raise InvalidTransactionDataError(f"{name} must be a boolean, got {value!r}")


def parse_transaction(payload: Dict[str, Any]) -> Transaction:
    """
    Build a Transaction from a ledger payload.

    Accepts the ledger's camelCase names (accountId, installmentMonths,
    isInterestFree) as well as snake_case.

    Raises:
        InvalidTransactionDataError: On missing fields, bad dates, negative
            or non-finite amounts, unknown types, non-positive installment
            months or a non-boolean interest-free flag
    """
    raw_type = _field(payload, "type")
    try:
        txn_type = TransactionType(str(raw_type).upper())
    except ValueError as e:
        raise InvalidTransactionDataError(f"Unknown transaction type: {raw_type!r}") from e

    interest_free = _field(payload, "isInterestFree", "is_interest_free", required=False)

    return Transaction(
        id=str(_field(payload, "id")),
        date=parse_date(_field(payload, "date")),
        description=str(_field(payload, "description", required=False) or ""),
        amount=parse_amount(_field(payload, "amount")),
        type=txn_type,
        category=str(_field(payload, "category", required=False) or ""),
        account_id=str(_field(payload, "accountId", "account_id")),
        installment_months=parse_installment_months(
            _field(payload, "installmentMonths", "installment_months", required=False)
        ),
        is_interest_free=parse_flag(interest_free, "is_interest_free"),
    )


def parse_account(payload: Dict[str, Any]) -> Account:
    """Build an Account from a ledger payload"""
    raw_propensity = _field(payload, "propensity")
    raw_type = _field(payload, "type", required=False)
    try:
        propensity = AccountPropensity(raw_propensity)
        account_type = AccountType(str(raw_type).upper()) if raw_type is not None else None
    except ValueError as e:
        raise InvalidTransactionDataError(f"Invalid account classification: {payload!r}") from e

    return Account(
        id=str(_field(payload, "id")),
        name=str(_field(payload, "name", required=False) or ""),
        propensity=propensity,
        type=account_type,
    )
