"""Shared ledger fetch with HTTP error mapping for v1 endpoints"""

import logging
from typing import List

from fastapi import HTTPException

from ledger_insights.domain.exceptions import InvalidTransactionDataError, LedgerAPIError
from ledger_insights.domain.models import Account, Transaction
from ledger_insights.infrastructure.clients.ledger import LedgerClient
from ledger_insights.infrastructure.observability.metrics import ledger_fetch_failures_counter


async def load_transactions(ledger_client: LedgerClient, request_id: str) -> List[Transaction]:
    """Fetch the transaction snapshot or raise the matching HTTPException"""
    try:
        return await ledger_client.get_transactions()
    except LedgerAPIError as e:
        ledger_fetch_failures_counter.inc()
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")
    except InvalidTransactionDataError as e:
        logging.warning(f"Invalid ledger data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


async def load_accounts(ledger_client: LedgerClient, request_id: str) -> List[Account]:
    """Fetch accounts or raise the matching HTTPException"""
    try:
        return await ledger_client.get_accounts()
    except LedgerAPIError as e:
        ledger_fetch_failures_counter.inc()
        logging.error(f"Ledger API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Ledger service unavailable")
    except InvalidTransactionDataError as e:
        logging.warning(f"Invalid ledger data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
