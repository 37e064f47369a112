"""Explanation data models — the readable form of a Sui transaction."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# Rendered gas for a transaction without effects
ZERO_GAS_SUI = "0.000000 SUI"


class ChangeType(enum.StrEnum):
    """Kind of object change."""

    CREATED = "Created"
    TRANSFERRED = "Transferred"
    MUTATED = "Mutated"
    DELETED = "Deleted"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ObjectMod:
    """One object created, transferred, mutated or deleted by a transaction.

    Attributes:
        change_type: Kind of change.
        object_type: Simplified Move type name.
        object_id: Object ID (hex).
        owner: Owner (or recipient, for transfers); None for deletions.
        details: One-line description of the change.
    """

    change_type: ChangeType
    object_type: str
    object_id: str
    owner: str | None
    details: str


@dataclass(frozen=True)
class BalanceChange:
    """One balance delta.

    Attributes:
        owner: Address whose balance changed.
        coin_type: Simplified coin type name.
        amount: Signed amount in the coin's base unit (negative = sent).
        amount_readable: Signed, human-formatted amount.
    """

    owner: str
    coin_type: str
    amount: int
    amount_readable: str


@dataclass(frozen=True)
class TransactionExplanation:
    """Readable explanation of one transaction.

    ``actions[i]`` is always ``object_changes[i].details``.
    """

    digest: str
    sender: str = ""
    status: str = ""
    gas_used: int = 0  # MIST (1 SUI = 1,000,000,000 MIST)
    gas_used_sui: str = ZERO_GAS_SUI
    actions: tuple[str, ...] = ()
    object_changes: tuple[ObjectMod, ...] = ()
    balance_changes: tuple[BalanceChange, ...] = ()
    events: tuple[str, ...] = ()
    summary: str = field(default="")

    @classmethod
    def empty(cls, digest: str = "") -> TransactionExplanation:
        """Return the zero value: no sender, no status, no gas, no changes."""
        return cls(digest=digest)
