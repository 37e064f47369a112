"""Application entry point for the sui-readable server."""

from __future__ import annotations

import os

import uvicorn

from sui_readable.config.settings import AppConfig


def main() -> None:
    """Start the sui-readable server."""
    config = AppConfig()
    reload = os.getenv("SUIREADABLE_RELOAD", "false").lower() in ("1", "true", "yes")
    uvicorn.run(
        "sui_readable.api.app:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        reload=reload,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":
    main()
