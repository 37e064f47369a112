"""Formatting helpers — type names, addresses, MIST amounts."""

from __future__ import annotations

import re
from decimal import Decimal

MIST_PER_SUI = 1_000_000_000
TYPE_SEPARATOR = "::"

NATIVE_COIN_MARKER = "0x2::sui::SUI"
COIN_MODULE_MARKER = "::coin::Coin"
NFT_MODULE_MARKER = "::nft::"

NATIVE_COIN_LABEL = "SUI Coin"
COIN_LABEL = "Coin"
NFT_LABEL = "NFT"

_SHORT_ADDRESS_MAX = 10
_ADDRESS_HEAD = 6
_ADDRESS_TAIL = 4

# 0x0000...0002::sui::SUI -> 0x2::sui::SUI
_PADDED_ADDRESS = re.compile(r"0x0+([0-9a-fA-F]+?)(?=::)")


def _collapse_addresses(type_str: str) -> str:
    return _PADDED_ADDRESS.sub(r"0x\1", type_str)


def simplify_type(type_str: str) -> str:
    """Reduce a fully-qualified Move type to a short label.

    ``0x2::coin::Coin<0x2::sui::SUI>`` -> ``"SUI Coin"``, other coins ->
    ``"Coin"``, anything in an ``nft`` module -> ``"NFT"``, otherwise the last
    ``::`` segment. Heuristic only; generic arguments are not resolved.
    """
    collapsed = _collapse_addresses(type_str)
    if NATIVE_COIN_MARKER in collapsed:
        return NATIVE_COIN_LABEL
    if COIN_MODULE_MARKER in collapsed:
        return COIN_LABEL
    if NFT_MODULE_MARKER in collapsed:
        return NFT_LABEL
    return type_str.rsplit(TYPE_SEPARATOR, 1)[-1]


def shorten_address(address: str) -> str:
    """Shorten long addresses for display (``0x1234...cdef``)."""
    if len(address) > _SHORT_ADDRESS_MAX:
        return f"{address[:_ADDRESS_HEAD]}...{address[-_ADDRESS_TAIL:]}"
    return address


def mist_to_sui(mist: int) -> Decimal:
    """Convert MIST to SUI without float rounding."""
    return Decimal(mist) / MIST_PER_SUI


def format_sui(mist: int, *, signed: bool = False) -> str:
    """Render a MIST amount as SUI with 6 decimals, e.g. ``"-2.500000 SUI"``."""
    spec = "+.6f" if signed else ".6f"
    return f"{mist_to_sui(mist):{spec}} SUI"


def format_amount(amount: int, coin_type: str) -> str:
    """Render a signed balance delta for a simplified coin type.

    SUI amounts are converted from MIST and suffixed; other coins keep their
    raw integer since their decimals are unknown here.
    """
    if coin_type == NATIVE_COIN_LABEL:
        return format_sui(amount, signed=True)
    return f"{amount:+d}"


def pluralize(count: int, noun: str) -> str:
    """``pluralize(1, "change")`` -> ``"1 change"``; otherwise adds an ``s``."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
