"""Sui JSON-RPC client — connection handshake and transaction lookup.

Async HTTP client for a Sui full node:
- ``sui_getChainIdentifier`` — handshake performed by :meth:`SuiClient.connect`
- ``sui_getTransactionBlock`` — transaction with input, effects, events,
  object changes and balance changes
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, Any, Self

import httpx

from sui_readable.errors.ledger_errors import (
    LedgerConnectionError,
    LedgerNetworkError,
    TransactionNotFoundError,
)
from sui_readable.sui.digest import parse_digest
from sui_readable.sui.models import RawTransactionRecord

if TYPE_CHECKING:
    from types import TracebackType

    from sui_readable.config.settings import SuiConfig

logger = logging.getLogger(__name__)

# Every optional section of a transaction block response
TRANSACTION_OPTIONS: dict[str, bool] = {
    "showInput": True,
    "showEffects": True,
    "showEvents": True,
    "showObjectChanges": True,
    "showBalanceChanges": True,
}

_NOT_FOUND_MARKERS = ("could not find", "not found", "does not exist")


class _RPCError(Exception):
    """JSON-RPC ``error`` object returned by the full node."""

    def __init__(self, code: Any, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class SuiClient:
    """Async JSON-RPC client for a Sui full node.

    Usage::

        client = SuiClient(config)
        await client.connect()
        try:
            record = await client.get_transaction(digest)
        finally:
            await client.close()

    or ``async with SuiClient(config) as client: ...``.
    """

    def __init__(
        self,
        config: SuiConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Sui client.

        Args:
            config: Sui configuration (rpc_url, timeout).
            transport: Optional httpx transport (e.g. a mock in tests).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._ids = itertools.count(1)
        self._chain_id = ""

    async def connect(self) -> None:
        """Create the underlying HTTP client and verify the node responds.

        Raises:
            LedgerConnectionError: If the node is unreachable or rejects
                the handshake.
        """
        self._client = httpx.AsyncClient(
            base_url=self._config.rpc_url,
            headers={"Content-Type": "application/json"},
            timeout=self._config.timeout,
            transport=self._transport,
        )
        try:
            chain_id = await self._call("sui_getChainIdentifier", [])
        except (httpx.HTTPError, _RPCError, ValueError) as exc:
            await self.close()
            msg = f"Failed to connect to Sui: {exc}"
            raise LedgerConnectionError(msg) from exc
        self._chain_id = str(chain_id)
        logger.debug("Connected to Sui node %s (chain %s)", self._config.rpc_url, self._chain_id)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def is_connected(self) -> bool:
        """Check if the HTTP client is active."""
        return self._client is not None

    @property
    def chain_id(self) -> str:
        """Chain identifier reported during the handshake."""
        return self._chain_id

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_transaction(self, digest: str) -> RawTransactionRecord:
        """Fetch a transaction block with every optional section populated.

        Args:
            digest: Base58 transaction digest.

        Returns:
            The parsed raw transaction record.

        Raises:
            InvalidDigestError: If *digest* is not a well-formed digest.
            TransactionNotFoundError: If the node has no such transaction.
            LedgerNetworkError: On transport or other RPC errors.
        """
        parse_digest(digest)

        try:
            result = await self._call("sui_getTransactionBlock", [digest, TRANSACTION_OPTIONS])
        except _RPCError as exc:
            if any(marker in exc.message.lower() for marker in _NOT_FOUND_MARKERS):
                msg = f"Transaction not found: {digest}"
                raise TransactionNotFoundError(msg) from exc
            msg = f"Failed to fetch transaction from Sui: {exc.message}"
            raise LedgerNetworkError(msg) from exc
        except (httpx.HTTPError, ValueError) as exc:
            msg = f"Failed to fetch transaction from Sui: {exc}"
            raise LedgerNetworkError(msg) from exc

        if not isinstance(result, dict):
            msg = f"Failed to fetch transaction from Sui: unexpected result for {digest}"
            raise LedgerNetworkError(msg)
        try:
            return RawTransactionRecord.from_dict(result)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            msg = f"Failed to fetch transaction from Sui: malformed result for {digest}"
            raise LedgerNetworkError(msg) from exc

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _ensure_connected(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "Sui client not connected. Call connect() first."
            raise LedgerConnectionError(msg)
        return self._client

    async def _call(self, method: str, params: list[Any]) -> Any:
        """Send one JSON-RPC request and return its ``result``.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses.
            ValueError: If the body is not valid JSON-RPC.
            _RPCError: If the node returned an ``error`` object.
        """
        client = self._ensure_connected()
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        response = await client.post("", json=payload)
        response.raise_for_status()
        body = response.json()
        if not isinstance(body, dict):
            msg = f"Malformed JSON-RPC response to {method}"
            raise ValueError(msg)
        error = body.get("error")
        if error:
            if isinstance(error, dict):
                raise _RPCError(error.get("code", 0), str(error.get("message", error)))
            raise _RPCError(0, str(error))
        if "result" not in body:
            msg = f"JSON-RPC response to {method} has no result"
            raise ValueError(msg)
        return body["result"]
