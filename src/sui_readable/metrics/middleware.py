"""Prometheus HTTP request metrics middleware for FastAPI.

Tracks, per API route template (``/api/explain``, ``/api/health``):
- ``http_request_total`` (counter) — requests by method, route, status
- ``http_request_duration_seconds`` (histogram) — duration by method, route

Static file and ``/metrics`` requests are not recorded.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from prometheus_client import CollectorRegistry
    from starlette.requests import Request
    from starlette.responses import Response

_APP_LABEL = "sui-readable"
_TRACKED_PREFIX = "/api/"

_LABELS = ("method", "route", "status_code", "app")
_DURATION_LABELS = ("method", "route", "app")


def _route_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that records API request count and duration."""

    def __init__(self, app: object, *, registry: CollectorRegistry) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._request_count = Counter(
            "http_request_total",
            "Total HTTP API requests",
            _LABELS,
            registry=registry,
        )
        self._request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP API request duration in seconds",
            _DURATION_LABELS,
            registry=registry,
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:  # type: ignore[type-arg]
        """Time and count ``/api/`` requests; pass everything else through."""
        if not request.url.path.startswith(_TRACKED_PREFIX):
            return await call_next(request)

        start = time.monotonic()
        response: Response = await call_next(request)
        duration = time.monotonic() - start
        route = _route_label(request)

        self._request_count.labels(
            method=request.method,
            route=route,
            status_code=str(response.status_code),
            app=_APP_LABEL,
        ).inc()
        self._request_duration.labels(
            method=request.method,
            route=route,
            app=_APP_LABEL,
        ).observe(duration)

        return response
