"""API middleware — CORS."""

from sui_readable.api.middleware.cors import setup_cors

__all__ = ["setup_cors"]
