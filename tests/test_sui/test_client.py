"""Tests for the Sui JSON-RPC client — uses httpx mock transport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from sui_readable.config.settings import SuiConfig
from sui_readable.errors.ledger_errors import (
    InvalidDigestError,
    LedgerConnectionError,
    LedgerNetworkError,
    TransactionNotFoundError,
)
from sui_readable.sui.client import TRANSACTION_OPTIONS, SuiClient
from sui_readable.sui.digest import base58_encode
from sui_readable.sui.models import RawTransactionRecord

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_CONFIG = SuiConfig(rpc_url="https://sui.test", timeout=5.0)
_CHAIN_ID = "35834a8a"

TEST_DIGEST = base58_encode(bytes(range(1, 33)))


def _rpc_handler(
    tx_response: dict[str, Any] | None = None,
    *,
    seen: list[dict[str, Any]] | None = None,
):
    """Build a handler answering the handshake and one transaction query."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if seen is not None:
            seen.append(body)
        if body["method"] == "sui_getChainIdentifier":
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": _CHAIN_ID})
        response = tx_response or {"result": {"digest": TEST_DIGEST}}
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], **response})

    return handler


def _client(handler) -> SuiClient:
    return SuiClient(_CONFIG, transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestSuiClientLifecycle:
    def test_not_connected_by_default(self) -> None:
        assert SuiClient(_CONFIG).is_connected is False

    @pytest.mark.asyncio
    async def test_connect_and_close(self) -> None:
        client = _client(_rpc_handler())
        await client.connect()
        assert client.is_connected is True
        assert client.chain_id == _CHAIN_ID
        await client.close()
        assert client.is_connected is False

    @pytest.mark.asyncio
    async def test_close_idempotent(self) -> None:
        client = SuiClient(_CONFIG)
        await client.close()
        assert client.is_connected is False

    @pytest.mark.asyncio
    async def test_context_manager(self) -> None:
        async with _client(_rpc_handler()) as client:
            assert client.is_connected is True
        assert client.is_connected is False

    @pytest.mark.asyncio
    async def test_not_connected_raises(self) -> None:
        with pytest.raises(LedgerConnectionError, match="not connected"):
            await SuiClient(_CONFIG).get_transaction(TEST_DIGEST)

    @pytest.mark.asyncio
    async def test_connect_unreachable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)
        with pytest.raises(LedgerConnectionError, match="Failed to connect to Sui") as exc_info:
            await client.connect()
        assert exc_info.value.status_code == 500
        assert client.is_connected is False

    @pytest.mark.asyncio
    async def test_connect_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="maintenance")

        with pytest.raises(LedgerConnectionError):
            await _client(handler).connect()

    @pytest.mark.asyncio
    async def test_connect_rpc_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "Method not found"}},
            )

        with pytest.raises(LedgerConnectionError, match="Method not found"):
            await _client(handler).connect()


# ---------------------------------------------------------------------------
# get_transaction
# ---------------------------------------------------------------------------


class TestGetTransaction:
    @pytest.mark.asyncio
    async def test_fetch_requests_all_sections(self, tx_result) -> None:
        seen: list[dict[str, Any]] = []
        async with _client(_rpc_handler({"result": tx_result}, seen=seen)) as client:
            record = await client.get_transaction(TEST_DIGEST)

        assert isinstance(record, RawTransactionRecord)
        assert record.transaction is not None
        assert record.transaction.sender == tx_result["transaction"]["data"]["sender"]
        query = seen[-1]
        assert query["method"] == "sui_getTransactionBlock"
        assert query["params"] == [TEST_DIGEST, TRANSACTION_OPTIONS]
        assert all(TRANSACTION_OPTIONS.values())

    @pytest.mark.asyncio
    async def test_invalid_digest_makes_no_request(self) -> None:
        seen: list[dict[str, Any]] = []
        async with _client(_rpc_handler(seen=seen)) as client:
            with pytest.raises(InvalidDigestError):
                await client.get_transaction("not-a-digest")
        assert [b["method"] for b in seen] == ["sui_getChainIdentifier"]

    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        error = {
            "error": {
                "code": -32602,
                "message": f"Could not find the referenced transaction [TransactionDigest({TEST_DIGEST})].",
            }
        }
        async with _client(_rpc_handler(error)) as client:
            with pytest.raises(TransactionNotFoundError, match="Transaction not found") as exc_info:
                await client.get_transaction(TEST_DIGEST)
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_other_rpc_error(self) -> None:
        error = {"error": {"code": -32000, "message": "Internal error"}}
        async with _client(_rpc_handler(error)) as client:
            with pytest.raises(LedgerNetworkError, match="Internal error") as exc_info:
                await client.get_transaction(TEST_DIGEST)
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_transport_error_during_fetch(self) -> None:
        calls = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] == 1:
                return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": _CHAIN_ID})
            raise httpx.ReadTimeout("timed out", request=request)

        async with _client(handler) as client:
            with pytest.raises(LedgerNetworkError, match="Failed to fetch transaction from Sui"):
                await client.get_transaction(TEST_DIGEST)

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        calls = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] == 1:
                return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": _CHAIN_ID})
            return httpx.Response(200, text="<html>bad gateway</html>")

        async with _client(handler) as client:
            with pytest.raises(LedgerNetworkError):
                await client.get_transaction(TEST_DIGEST)

    @pytest.mark.asyncio
    async def test_null_result(self) -> None:
        async with _client(_rpc_handler({"result": None})) as client:
            with pytest.raises(LedgerNetworkError, match="unexpected result"):
                await client.get_transaction(TEST_DIGEST)

    @pytest.mark.asyncio
    async def test_partially_malformed_result_is_tolerated(self, make_tx_result) -> None:
        result = make_tx_result(
            transaction={"data": None},
            effects={"status": "success"},
            objectChanges=["created"],
        )
        async with _client(_rpc_handler({"result": result})) as client:
            record = await client.get_transaction(TEST_DIGEST)

        assert record.transaction is not None
        assert record.transaction.sender == ""
        assert record.effects is not None
        assert record.effects.is_ok is True
        assert len(record.object_changes) == 1

    @pytest.mark.asyncio
    async def test_unparseable_result(self, make_tx_result, monkeypatch) -> None:
        def explode(data):
            raise TypeError("unexpected shape")

        monkeypatch.setattr(RawTransactionRecord, "from_dict", explode)
        async with _client(_rpc_handler({"result": make_tx_result()})) as client:
            with pytest.raises(LedgerNetworkError, match="malformed result") as exc_info:
                await client.get_transaction(TEST_DIGEST)
        assert exc_info.value.status_code == 400
