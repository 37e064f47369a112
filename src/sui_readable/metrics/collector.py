"""Metrics collector — Prometheus counters and histograms.

- ``sui_readable_explain_duration_seconds`` histogram — fetch + explain time
- ``sui_readable_explain_total`` counter-vec — requests by outcome
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

from prometheus_client import CollectorRegistry, Counter, Histogram

if TYPE_CHECKING:
    from collections.abc import Iterator


_PREFIX = "sui_readable"

OUTCOME_SUCCESS = "success"


class MetricsCollector:
    """Low-level Prometheus collector that owns the registry.

    Use :class:`ExplainMetrics` for the high-level tracking interface.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._registry

    def histogram(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Histogram:
        """Register and return a Histogram."""
        return Histogram(name, doc, labels, registry=self._registry)

    def counter(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Counter:
        """Register and return a Counter."""
        return Counter(name, doc, labels, registry=self._registry)


class ExplainMetrics:
    """Metrics for transaction explanation requests."""

    def __init__(self, collector: MetricsCollector | None = None) -> None:
        self._collector = collector or MetricsCollector()

        self._duration = self._collector.histogram(
            f"{_PREFIX}_explain_duration_seconds",
            "Duration of transaction fetch and explanation",
        )
        self._outcomes = self._collector.counter(
            f"{_PREFIX}_explain",
            "Transaction explanation requests by outcome",
            ("outcome",),
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._collector.registry

    def record_outcome(self, outcome: str) -> None:
        """Count one request with the given outcome (``success`` or an error code)."""
        self._outcomes.labels(outcome=outcome).inc()

    @contextmanager
    def track_explain(self) -> Iterator[None]:
        """Track the duration of one fetch + explain."""
        start = time.monotonic()
        try:
            yield
        finally:
            self._duration.observe(time.monotonic() - start)
