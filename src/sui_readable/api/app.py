"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_client import generate_latest
from starlette.responses import Response

from sui_readable import __version__
from sui_readable.api.middleware.cors import setup_cors
from sui_readable.api.routes import router
from sui_readable.api.schemas import ExplainResponse
from sui_readable.config.settings import AppConfig
from sui_readable.errors.readable_errors import ReadableError
from sui_readable.explain.service import ExplainService
from sui_readable.metrics.collector import ExplainMetrics
from sui_readable.metrics.middleware import PrometheusMiddleware

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup / shutdown logging. Ledger connections are opened per request."""
    config: AppConfig = app.state.config
    logger.info("sui-readable %s started (Sui RPC %s)", __version__, config.sui.rpc_url)
    yield
    logger.info("sui-readable shut down")


def create_app(*, config: AppConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        config: Optional AppConfig. If *None*, a default config is created
            from environment variables.
    """
    if config is None:
        config = AppConfig()

    app = FastAPI(
        title="sui-readable",
        version=__version__,
        description="Plain-language explanations of Sui transactions",
        lifespan=_lifespan,
    )

    app.state.config = config
    metrics = ExplainMetrics() if config.metrics.enabled else None
    app.state.metrics = metrics
    app.state.explain_service = ExplainService(config, metrics)

    # -- Middleware --
    setup_cors(app)
    if metrics is not None:
        app.add_middleware(PrometheusMiddleware, registry=metrics.registry)

    # -- Error handler --
    @app.exception_handler(ReadableError)
    async def _readable_error_handler(request: Request, exc: ReadableError) -> JSONResponse:
        body = ExplainResponse(success=False, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    # -- API routes --
    app.include_router(router)

    if metrics is not None:

        @app.get("/metrics", tags=["base"], include_in_schema=False)
        async def metrics_endpoint() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=generate_latest(metrics.registry),
                media_type="text/plain; version=0.0.4; charset=utf-8",
            )

    # -- Static frontend (mounted last so API routes take precedence) --
    static_dir = Path(config.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.debug("Static directory %s not found; frontend not served", static_dir)

    return app
