"""API request/response schemas (Pydantic models)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sui_readable.explain.models import ChangeType  # noqa: TC001 - Pydantic needs this at runtime


class ExplainRequest(BaseModel):
    """Body of ``POST /api/explain``."""

    digest: str = Field(..., description="Base58 transaction digest")


class ObjectModResponse(BaseModel):
    """One object change."""

    change_type: ChangeType
    object_type: str
    object_id: str
    owner: str | None = None
    details: str

    model_config = {"from_attributes": True}


class BalanceChangeResponse(BaseModel):
    """One balance delta."""

    owner: str
    coin_type: str
    amount: int = Field(description="Signed amount; negative = sent")
    amount_readable: str

    model_config = {"from_attributes": True}


class TransactionExplanationResponse(BaseModel):
    """Readable explanation of a transaction."""

    digest: str
    sender: str
    status: str
    gas_used: int = Field(description="Net gas in MIST (1 SUI = 1,000,000,000 MIST)")
    gas_used_sui: str
    actions: list[str]
    object_changes: list[ObjectModResponse]
    balance_changes: list[BalanceChangeResponse]
    events: list[str]
    summary: str

    model_config = {"from_attributes": True}


class ExplainResponse(BaseModel):
    """Envelope returned by ``POST /api/explain``, on success and on failure."""

    success: bool
    explanation: TransactionExplanationResponse | None = None
    error: str | None = None
