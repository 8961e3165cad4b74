"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LedgerAPIError(DomainException):
    """Ledger service returned an error or is unavailable"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction or account data is malformed or invalid"""

    pass
