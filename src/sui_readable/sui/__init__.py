"""Sui ledger access — JSON-RPC client, digest parsing, raw response models."""

from sui_readable.sui.client import SuiClient
from sui_readable.sui.digest import parse_digest
from sui_readable.sui.models import RawTransactionRecord

__all__ = ["RawTransactionRecord", "SuiClient", "parse_digest"]
