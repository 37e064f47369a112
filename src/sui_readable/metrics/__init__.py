"""Metrics — Prometheus metrics collection and exposure."""

from __future__ import annotations

from sui_readable.metrics.collector import ExplainMetrics, MetricsCollector

__all__ = ["ExplainMetrics", "MetricsCollector"]
