"""Transaction explanation — engine, data models, service."""

from sui_readable.explain.engine import explain_transaction
from sui_readable.explain.models import (
    BalanceChange,
    ChangeType,
    ObjectMod,
    TransactionExplanation,
)
from sui_readable.explain.service import ExplainService

__all__ = [
    "BalanceChange",
    "ChangeType",
    "ExplainService",
    "ObjectMod",
    "TransactionExplanation",
    "explain_transaction",
]
