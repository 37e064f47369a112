"""Sui ledger client errors — connection, digest parsing, fetch failures."""

from __future__ import annotations

from sui_readable.errors.readable_errors import ReadableError


class LedgerConnectionError(ReadableError):
    """The Sui full node could not be reached or rejected the handshake."""

    def __init__(self, message: str, *, status_code: int = 500) -> None:
        super().__init__(message, status_code=status_code, code="ledger-connection-error")


class InvalidDigestError(ReadableError):
    """The supplied string is not a well-formed transaction digest."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code, code="invalid-digest")


class LedgerNetworkError(ReadableError):
    """The transaction query failed in transport or returned an RPC error."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code, code="ledger-network-error")


class TransactionNotFoundError(ReadableError):
    """The full node has no transaction with the requested digest."""

    def __init__(self, message: str, *, status_code: int = 404) -> None:
        super().__init__(message, status_code=status_code, code="transaction-not-found")
