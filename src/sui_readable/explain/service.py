"""Explain service — fetch a transaction and run the explanation engine.

Each call opens its own ledger client and closes it before returning; no
state is shared between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sui_readable.errors.readable_errors import ReadableError
from sui_readable.explain.engine import explain_transaction
from sui_readable.metrics.collector import OUTCOME_SUCCESS
from sui_readable.sui.client import SuiClient

if TYPE_CHECKING:
    import httpx

    from sui_readable.config.settings import AppConfig
    from sui_readable.explain.models import TransactionExplanation
    from sui_readable.metrics.collector import ExplainMetrics

logger = logging.getLogger(__name__)


class ExplainService:
    """Turns a transaction digest into a :class:`TransactionExplanation`."""

    def __init__(
        self,
        config: AppConfig,
        metrics: ExplainMetrics | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._metrics = metrics
        self._transport = transport

    def _client(self) -> SuiClient:
        return SuiClient(self._config.sui, transport=self._transport)

    async def explain(self, digest: str) -> TransactionExplanation:
        """Fetch the transaction *digest* and explain it.

        Raises:
            LedgerConnectionError: If the Sui node cannot be reached.
            InvalidDigestError: If *digest* is malformed.
            TransactionNotFoundError: If the transaction does not exist.
            LedgerNetworkError: If the query fails.
        """
        logger.info("Explaining transaction: %s", digest)
        try:
            if self._metrics is None:
                explanation = await self._fetch_and_explain(digest)
            else:
                with self._metrics.track_explain():
                    explanation = await self._fetch_and_explain(digest)
        except ReadableError as exc:
            logger.warning("Failed to explain transaction %s: %s", digest, exc.message)
            self._record(exc.code)
            raise
        logger.info("Successfully explained transaction %s", digest)
        self._record(OUTCOME_SUCCESS)
        return explanation

    async def _fetch_and_explain(self, digest: str) -> TransactionExplanation:
        async with self._client() as client:
            record = await client.get_transaction(digest)
        return explain_transaction(record, digest=digest)

    def _record(self, outcome: str) -> None:
        if self._metrics is not None:
            self._metrics.record_outcome(outcome)
