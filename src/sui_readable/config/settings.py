"""Application settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``SUIREADABLE_``, nested via ``__``)
2. YAML config file (``SUIREADABLE_CONFIG_PATH`` env var or ``AppConfig.from_yaml``)
3. Defaults defined here
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Enums for validated choices
# ---------------------------------------------------------------------------


class Network(enum.StrEnum):
    """Sui networks with a public full node."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"
    LOCALNET = "localnet"

    @property
    def rpc_url(self) -> str:
        """Default JSON-RPC endpoint for this network."""
        return _NETWORK_RPC_URLS[self]


_NETWORK_RPC_URLS = {
    Network.MAINNET: "https://fullnode.mainnet.sui.io:443",
    Network.TESTNET: "https://fullnode.testnet.sui.io:443",
    Network.DEVNET: "https://fullnode.devnet.sui.io:443",
    Network.LOCALNET: "http://127.0.0.1:9000",
}

# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class ServerConfig(BaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="SUIREADABLE_SERVER__",
        case_sensitive=False,
    )

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000


class SuiConfig(BaseSettings):
    """Sui full node JSON-RPC settings.

    ``rpc_url`` wins when set; otherwise the public endpoint of ``network``
    is used.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUIREADABLE_SUI__",
        case_sensitive=False,
    )

    network: Network = Field(
        default=Network.MAINNET,
        description="Sui network: mainnet, testnet, devnet or localnet",
    )
    rpc_url: str = ""
    timeout: float = 30.0

    @model_validator(mode="after")
    def _default_rpc_url(self) -> Self:
        if not self.rpc_url:
            self.rpc_url = self.network.rpc_url
        return self


class MetricsConfig(BaseSettings):
    """Prometheus metrics settings."""

    model_config = SettingsConfigDict(
        env_prefix="SUIREADABLE_METRICS__",
        case_sensitive=False,
    )

    enabled: bool = True


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Loads settings from environment variables (``SUIREADABLE_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUIREADABLE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = False
    config_path: str = ""
    static_dir: str = "static"

    server: ServerConfig = Field(default_factory=ServerConfig)
    sui: SuiConfig = Field(default_factory=SuiConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        # YAML values serve as defaults; env vars (already in *values*) win.
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``AppConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
