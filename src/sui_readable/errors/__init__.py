"""Error types raised by the ledger client and surfaced by the API."""

from sui_readable.errors.ledger_errors import (
    InvalidDigestError,
    LedgerConnectionError,
    LedgerNetworkError,
    TransactionNotFoundError,
)
from sui_readable.errors.readable_errors import ReadableError

__all__ = [
    "InvalidDigestError",
    "LedgerConnectionError",
    "LedgerNetworkError",
    "ReadableError",
    "TransactionNotFoundError",
]
