"""Shared test fixtures for the sui-readable test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from sui_readable.sui.digest import base58_encode

if TYPE_CHECKING:
    from collections.abc import Callable

# A well-formed digest: Base58 of 32 bytes
TEST_DIGEST = base58_encode(bytes(range(1, 33)))

SENDER = "0x7d20dcdb2bca4f508ea9613994683eb4e76e9c4ed371169677c1be02aaf0b58e"
RECIPIENT = "0xabcdefabcdefabcdefabcdef"
OBJECT_ID = "0x5b1c6f2a9e0d4c8b7a6f5e4d3c2b1a09f8e7d6c5b4a3928170f6e5d4c3b2a190"
SUI_COIN_TYPE = "0x2::coin::Coin<0x2::sui::SUI>"


def _tx_result(**overrides: Any) -> dict[str, Any]:
    """A ``sui_getTransactionBlock`` result with every section populated."""
    result: dict[str, Any] = {
        "digest": TEST_DIGEST,
        "transaction": {
            "data": {
                "messageVersion": "v1",
                "transaction": {"kind": "ProgrammableTransaction"},
                "sender": SENDER,
            },
            "txSignatures": ["AAAA"],
        },
        "effects": {
            "messageVersion": "v1",
            "status": {"status": "success"},
            "gasUsed": {
                "computationCost": "750000",
                "storageCost": "2000000",
                "storageRebate": "1750000",
                "nonRefundableStorageFee": "17676",
            },
        },
        "events": [
            {
                "id": {"txDigest": TEST_DIGEST, "eventSeq": "0"},
                "packageId": "0xdee9",
                "transactionModule": "clob_v2",
                "sender": SENDER,
                "type": "0xdee9::clob_v2::OrderPlaced<0x2::sui::SUI>",
                "parsedJson": {},
            }
        ],
        "objectChanges": [
            {
                "type": "created",
                "sender": SENDER,
                "owner": {"AddressOwner": RECIPIENT},
                "objectType": SUI_COIN_TYPE,
                "objectId": OBJECT_ID,
                "version": "10",
                "digest": "x",
            },
            {
                "type": "mutated",
                "sender": SENDER,
                "owner": {"AddressOwner": SENDER},
                "objectType": "0xabc::game::Hero",
                "objectId": "0x01",
                "version": "11",
                "previousVersion": "10",
                "digest": "y",
            },
        ],
        "balanceChanges": [
            {
                "owner": {"AddressOwner": SENDER},
                "coinType": "0x2::sui::SUI",
                "amount": "-1000000",
            }
        ],
        "timestampMs": "1700000000000",
        "checkpoint": "123",
    }
    result.update(overrides)
    return result


@pytest.fixture
def tx_result() -> dict[str, Any]:
    """Provide a fully populated raw transaction result dict."""
    return _tx_result()


@pytest.fixture
def make_tx_result() -> Callable[..., dict[str, Any]]:
    """Provide a builder for raw transaction results with overridden sections."""
    return _tx_result


@pytest.fixture
def app_config():
    """Provide a test AppConfig with safe defaults."""
    from sui_readable.config.settings import AppConfig, SuiConfig

    return AppConfig(
        debug=True,
        static_dir="/nonexistent-static-dir",
        sui=SuiConfig(rpc_url="https://sui.test", timeout=5.0),
    )


@pytest.fixture
def test_client(app_config):
    """Provide a FastAPI TestClient with the app wired to test config."""
    from fastapi.testclient import TestClient

    from sui_readable.api.app import create_app

    app = create_app(config=app_config)
    return TestClient(app, raise_server_exceptions=False)
