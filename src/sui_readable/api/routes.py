"""Explain and health endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from sui_readable.api.schemas import (
    ExplainRequest,
    ExplainResponse,
    TransactionExplanationResponse,
)
from sui_readable.explain.service import ExplainService

router = APIRouter(prefix="/api", tags=["explain"])


def get_explain_service(request: Request) -> ExplainService:
    """Retrieve the explain service stored on ``app.state``."""
    return request.app.state.explain_service


@router.post("/explain")
async def explain(
    body: ExplainRequest,
    service: Annotated[ExplainService, Depends(get_explain_service)],
) -> ExplainResponse:
    """Fetch a transaction by digest and explain it in plain language.

    Failures are returned as ``{"success": false, "error": ...}`` by the
    application's ``ReadableError`` handler.
    """
    explanation = await service.explain(body.digest)
    return ExplainResponse(
        success=True,
        explanation=TransactionExplanationResponse.model_validate(explanation),
    )


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    return "OK"
