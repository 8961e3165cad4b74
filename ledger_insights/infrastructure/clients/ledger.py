"""Ledger API HTTP client for fetching transactions and accounts"""

import httpx
from typing import Any, Dict, List
from ledger_insights.domain.models import Account, Transaction
from ledger_insights.domain.exceptions import LedgerAPIError
from ledger_insights.domain.validation import parse_account, parse_transaction
from ledger_insights.config import settings


class LedgerClient:
    """Client for the external ledger service (read-only)"""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.ledger_api_base
        self.timeout = timeout or settings.http_timeout_seconds

    async def _get_collection(self, path: str, key: str) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(f"{self.base_url}{path}")
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise LedgerAPIError(f"Ledger API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise LedgerAPIError(f"Ledger API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise LedgerAPIError(f"Ledger API unreachable: {e}") from e
            except ValueError as e:
                raise LedgerAPIError(f"Invalid JSON from ledger: {e}") from e

        records = data.get(key) if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise LedgerAPIError(f"Ledger response missing '{key}' list")
        return records

    async def get_transactions(self) -> List[Transaction]:
        """
        Fetch the full transaction snapshot.

        Raises:
            LedgerAPIError: On timeout, HTTP errors, or a malformed envelope
            InvalidTransactionDataError: If any record fails validation
        """
        records = await self._get_collection("/ledger/transactions", "transactions")
        return [parse_transaction(record) for record in records]

    async def get_accounts(self) -> List[Account]:
        """Fetch all accounts"""
        records = await self._get_collection("/ledger/accounts", "accounts")
        return [parse_account(record) for record in records]
