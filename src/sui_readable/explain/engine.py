"""Explanation engine — raw Sui transaction record to readable explanation.

Pure transformation: no I/O and no shared state. Missing sections in the raw
record leave the corresponding fields at their zero values; unrecognised
object changes become ``Unknown`` entries. The engine never raises for a
well-typed :class:`RawTransactionRecord`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sui_readable.explain.formatting import (
    format_amount,
    format_sui,
    pluralize,
    shorten_address,
    simplify_type,
)
from sui_readable.explain.models import (
    ZERO_GAS_SUI,
    BalanceChange,
    ChangeType,
    ObjectMod,
    TransactionExplanation,
)
from sui_readable.sui.models import (
    CreatedChange,
    DeletedChange,
    MutatedChange,
    TransferredChange,
)

if TYPE_CHECKING:
    from sui_readable.sui.models import (
        GasCostSummary,
        ObjectChange,
        RawBalanceChange,
        RawEvent,
        RawTransactionRecord,
        TransactionEffects,
    )

logger = logging.getLogger(__name__)

SUMMARY_SEPARATOR = " • "
STATUS_SUCCESS = "Success"


def explain_transaction(record: RawTransactionRecord, digest: str = "") -> TransactionExplanation:
    """Build the readable explanation of a transaction.

    Args:
        record: Raw ``sui_getTransactionBlock`` result.
        digest: Digest as requested by the caller; defaults to the record's.

    Returns:
        A fully populated TransactionExplanation.
    """
    digest = digest or record.digest
    sender = record.transaction.sender if record.transaction is not None else ""

    status = ""
    gas_used = 0
    gas_used_sui = ZERO_GAS_SUI
    if record.effects is not None:
        status = describe_status(record.effects)
        gas_used = compute_gas_used(record.effects.gas_used, digest=digest)
        gas_used_sui = format_sui(gas_used)

    object_changes = tuple(describe_object_change(c) for c in record.object_changes)
    balance_changes = tuple(describe_balance_change(b) for b in record.balance_changes)
    events = tuple(describe_event(e) for e in record.events)

    summary = generate_summary(
        object_count=len(object_changes),
        balance_count=len(balance_changes),
        gas_used_sui=gas_used_sui,
    )

    return TransactionExplanation(
        digest=digest,
        sender=sender,
        status=status,
        gas_used=gas_used,
        gas_used_sui=gas_used_sui,
        actions=tuple(c.details for c in object_changes),
        object_changes=object_changes,
        balance_changes=balance_changes,
        events=events,
        summary=summary,
    )


# ---------------------------------------------------------------------------
# Status / gas
# ---------------------------------------------------------------------------


def describe_status(effects: TransactionEffects) -> str:
    """``"Success"`` or ``"Failed : <error>"``."""
    if effects.is_ok:
        return STATUS_SUCCESS
    return f"Failed : {effects.error}"


def compute_gas_used(gas: GasCostSummary, *, digest: str = "") -> int:
    """Net gas in MIST: computation + storage - rebate, floored at zero."""
    total = gas.computation_cost + gas.storage_cost - gas.storage_rebate
    if total < 0:
        logger.warning(
            "Storage rebate exceeds gas charged for %s (computation=%d storage=%d rebate=%d)",
            digest or "<unknown>",
            gas.computation_cost,
            gas.storage_cost,
            gas.storage_rebate,
        )
        return 0
    return total


# ---------------------------------------------------------------------------
# Object / balance changes, events
# ---------------------------------------------------------------------------


def describe_object_change(change: ObjectChange) -> ObjectMod:
    """Classify an object change and describe it in one sentence."""
    if isinstance(change, CreatedChange):
        object_type = simplify_type(change.object_type)
        return ObjectMod(
            change_type=ChangeType.CREATED,
            object_type=object_type,
            object_id=change.object_id,
            owner=change.owner,
            details=f"Created new {object_type} owned by {shorten_address(change.owner)}",
        )
    if isinstance(change, TransferredChange):
        object_type = simplify_type(change.object_type)
        return ObjectMod(
            change_type=ChangeType.TRANSFERRED,
            object_type=object_type,
            object_id=change.object_id,
            owner=change.recipient,
            details=(
                f"Transferred {object_type} from {shorten_address(change.sender)} "
                f"to {shorten_address(change.recipient)}"
            ),
        )
    if isinstance(change, MutatedChange):
        object_type = simplify_type(change.object_type)
        return ObjectMod(
            change_type=ChangeType.MUTATED,
            object_type=object_type,
            object_id=change.object_id,
            owner=change.owner,
            details=f"Modified {object_type} owned by {shorten_address(change.owner)}",
        )
    if isinstance(change, DeletedChange):
        object_type = simplify_type(change.object_type)
        return ObjectMod(
            change_type=ChangeType.DELETED,
            object_type=object_type,
            object_id=change.object_id,
            owner=None,
            details=f"Deleted {object_type}",
        )
    return ObjectMod(
        change_type=ChangeType.UNKNOWN,
        object_type="Unknown",
        object_id="Unknown",
        owner=None,
        details="Unknown object change",
    )


def describe_balance_change(balance: RawBalanceChange) -> BalanceChange:
    """Simplify the coin type and format the signed amount."""
    coin_type = simplify_type(balance.coin_type)
    return BalanceChange(
        owner=balance.owner,
        coin_type=coin_type,
        amount=balance.amount,
        amount_readable=format_amount(balance.amount, coin_type),
    )


def describe_event(event: RawEvent) -> str:
    return f"Event: {simplify_type(event.event_type)} from package {event.package_id}"


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def generate_summary(*, object_count: int, balance_count: int, gas_used_sui: str) -> str:
    """One-line summary, e.g. ``"2 object changes • 1 balance change • Gas: 0.001000 SUI"``."""
    if object_count == 0 and balance_count == 0:
        return f"Transaction executed with {gas_used_sui} gas"

    parts: list[str] = []
    if object_count > 0:
        parts.append(pluralize(object_count, "object change"))
    if balance_count > 0:
        parts.append(pluralize(balance_count, "balance change"))
    return f"{SUMMARY_SEPARATOR.join(parts)}{SUMMARY_SEPARATOR}Gas: {gas_used_sui}"
