"""Application configuration."""

from sui_readable.config.settings import AppConfig

__all__ = ["AppConfig"]
