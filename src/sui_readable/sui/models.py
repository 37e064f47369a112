"""Sui JSON-RPC data models — transaction block response and its sections.

Data classes representing the ``sui_getTransactionBlock`` result with every
``show*`` option enabled. All sections are optional: a section the full node
did not return, or returned in an unexpected shape, is ``None`` (or an empty
list), never an error.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _to_int(value: Any) -> int:
    """Parse a JSON-RPC integer, which Sui encodes as a decimal string."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value))
    except (TypeError, ValueError):
        return 0


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def owner_to_string(owner: Any) -> str:
    """Render a Sui ``Owner`` as a single string.

    Address and object owners render as their address; shared and immutable
    objects render as ``"Shared"`` / ``"Immutable"``.
    """
    if owner is None:
        return ""
    if isinstance(owner, str):
        return owner
    if isinstance(owner, dict):
        if "AddressOwner" in owner:
            return str(owner["AddressOwner"])
        if "ObjectOwner" in owner:
            return str(owner["ObjectOwner"])
        if "ConsensusAddressOwner" in owner:
            inner = owner["ConsensusAddressOwner"]
            if isinstance(inner, dict):
                return str(inner.get("owner", ""))
            return str(inner)
        if "Shared" in owner:
            return "Shared"
        if "Immutable" in owner:
            return "Immutable"
    return str(owner)


# ---------------------------------------------------------------------------
# Transaction input / effects
# ---------------------------------------------------------------------------


class ExecutionStatus(enum.StrEnum):
    """Execution outcome reported in transaction effects."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class TransactionData:
    """The ``transaction.data`` section (we only need the sender)."""

    sender: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransactionData:
        """Create TransactionData from a ``transaction`` JSON object."""
        inner = _as_dict(data.get("data", data))
        return cls(sender=str(inner.get("sender", "")))


@dataclass(frozen=True)
class GasCostSummary:
    """Gas charged for a transaction, in MIST."""

    computation_cost: int = 0
    storage_cost: int = 0
    storage_rebate: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GasCostSummary:
        """Create GasCostSummary from an ``effects.gasUsed`` JSON object."""
        return cls(
            computation_cost=_to_int(data.get("computationCost", 0)),
            storage_cost=_to_int(data.get("storageCost", 0)),
            storage_rebate=_to_int(data.get("storageRebate", 0)),
        )


@dataclass(frozen=True)
class TransactionEffects:
    """The ``effects`` section.

    Attributes:
        status: Execution outcome.
        error: Failure description when ``status`` is FAILURE.
        gas_used: Gas cost breakdown.
    """

    status: ExecutionStatus = ExecutionStatus.SUCCESS
    error: str = ""
    gas_used: GasCostSummary = field(default_factory=GasCostSummary)

    @property
    def is_ok(self) -> bool:
        """Whether the transaction executed successfully."""
        return self.status == ExecutionStatus.SUCCESS

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransactionEffects:
        """Create TransactionEffects from an ``effects`` JSON object.

        ``status`` is normally ``{"status": ..., "error": ...}``; a bare
        status string is accepted as well.
        """
        status_data = data.get("status")
        if isinstance(status_data, str):
            status_data = {"status": status_data}
        status_data = _as_dict(status_data)
        raw_status = str(status_data.get("status", "")).lower()
        status = (
            ExecutionStatus.SUCCESS
            if raw_status == ExecutionStatus.SUCCESS
            else ExecutionStatus.FAILURE
        )
        return cls(
            status=status,
            error=str(status_data.get("error", "")),
            gas_used=GasCostSummary.from_dict(_as_dict(data.get("gasUsed"))),
        )


# ---------------------------------------------------------------------------
# Object changes — closed tagged union
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreatedChange:
    """A new object was created."""

    object_id: str
    object_type: str
    owner: str


@dataclass(frozen=True)
class TransferredChange:
    """An existing object moved to a new owner."""

    object_id: str
    object_type: str
    sender: str
    recipient: str


@dataclass(frozen=True)
class MutatedChange:
    """An existing object was modified in place."""

    object_id: str
    object_type: str
    owner: str


@dataclass(frozen=True)
class DeletedChange:
    """An object was deleted."""

    object_id: str
    object_type: str


@dataclass(frozen=True)
class UnknownChange:
    """Any other change kind (published, wrapped, ...)."""

    kind: str = ""


ObjectChange = CreatedChange | TransferredChange | MutatedChange | DeletedChange | UnknownChange


def parse_object_change(data: Any) -> ObjectChange:
    """Create an ObjectChange variant from an ``objectChanges`` entry.

    Entries that are not JSON objects become :class:`UnknownChange`.
    """
    if not isinstance(data, dict):
        return UnknownChange()
    kind = str(data.get("type", ""))
    object_id = str(data.get("objectId", ""))
    object_type = str(data.get("objectType", ""))

    if kind == "created":
        return CreatedChange(
            object_id=object_id,
            object_type=object_type,
            owner=owner_to_string(data.get("owner")),
        )
    if kind == "transferred":
        return TransferredChange(
            object_id=object_id,
            object_type=object_type,
            sender=str(data.get("sender", "")),
            recipient=owner_to_string(data.get("recipient")),
        )
    if kind == "mutated":
        return MutatedChange(
            object_id=object_id,
            object_type=object_type,
            owner=owner_to_string(data.get("owner")),
        )
    if kind == "deleted":
        return DeletedChange(object_id=object_id, object_type=object_type)
    return UnknownChange(kind=kind)


# ---------------------------------------------------------------------------
# Balance changes / events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RawBalanceChange:
    """One ``balanceChanges`` entry. ``amount`` is signed MIST (or token units)."""

    owner: str
    coin_type: str
    amount: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawBalanceChange:
        """Create RawBalanceChange from a ``balanceChanges`` entry."""
        return cls(
            owner=owner_to_string(data.get("owner")),
            coin_type=str(data.get("coinType", "")),
            amount=_to_int(data.get("amount", 0)),
        )


@dataclass(frozen=True)
class RawEvent:
    """One emitted event."""

    event_type: str
    package_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawEvent:
        """Create RawEvent from an ``events`` entry."""
        return cls(
            event_type=str(data.get("type", "")),
            package_id=str(data.get("packageId", "")),
        )


# ---------------------------------------------------------------------------
# Transaction block response
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RawTransactionRecord:
    """A ``sui_getTransactionBlock`` result.

    Attributes:
        digest: Transaction digest (Base58).
        transaction: Input data, or None if not returned.
        effects: Execution effects, or None if not returned.
        object_changes: Object changes in node order.
        balance_changes: Balance changes in node order.
        events: Emitted events in emission order.
    """

    digest: str = ""
    transaction: TransactionData | None = None
    effects: TransactionEffects | None = None
    object_changes: list[ObjectChange] = field(default_factory=list)
    balance_changes: list[RawBalanceChange] = field(default_factory=list)
    events: list[RawEvent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawTransactionRecord:
        """Create RawTransactionRecord from a JSON-RPC ``result`` object."""
        transaction = data.get("transaction")
        effects = data.get("effects")
        events = data.get("events")
        # Older nodes wrap events as {"data": [...]}
        if isinstance(events, dict):
            events = events.get("data")
        return cls(
            digest=str(data.get("digest", "")),
            transaction=(
                TransactionData.from_dict(transaction)
                if isinstance(transaction, dict) and transaction
                else None
            ),
            effects=(
                TransactionEffects.from_dict(effects)
                if isinstance(effects, dict) and effects
                else None
            ),
            object_changes=[parse_object_change(c) for c in _as_list(data.get("objectChanges"))],
            balance_changes=[
                RawBalanceChange.from_dict(b)
                for b in _as_list(data.get("balanceChanges"))
                if isinstance(b, dict)
            ],
            events=[RawEvent.from_dict(e) for e in _as_list(events) if isinstance(e, dict)],
        )
