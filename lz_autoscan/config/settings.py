"""
Application settings.

Settings is a frozen dataclass built from the environment by get_settings().
The watched owner is passed explicitly to the pending-message service, so
tests and multi-owner setups can build their own Settings without touching env.
"""

from __future__ import annotations

from dataclasses import dataclass

from lz_autoscan.config.env import (
    TESTNET_API_BASE,
    TESTNET_TX_BASE,
    env_float,
    env_int,
    env_list,
    env_str,
    load_autoscan_env,
)
from lz_autoscan.core.exceptions import ConfigError

DEFAULT_PORT = 3000
DEFAULT_REQUEST_TIMEOUT_SEC = 5.0


@dataclass(frozen=True)
class Settings:
    """Service configuration: watched owner, listen address, LayerZero Scan endpoints."""

    owner: str
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    lz_api_base: str = TESTNET_API_BASE
    lz_tx_base: str = TESTNET_TX_BASE
    request_timeout_sec: float = DEFAULT_REQUEST_TIMEOUT_SEC
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self) -> None:
        # Frozen: normalise through object.__setattr__
        object.__setattr__(self, "owner", (self.owner or "").strip().lower())
        object.__setattr__(self, "lz_api_base", self.lz_api_base.rstrip("/"))
        object.__setattr__(self, "lz_tx_base", self.lz_tx_base.rstrip("/"))
        object.__setattr__(self, "log_level", (self.log_level or "INFO").strip().upper())
        object.__setattr__(self, "log_format", (self.log_format or "json").strip().lower())

    def validate(self) -> "Settings":
        """Raise ConfigError when a required setting is missing; return self otherwise."""
        if not self.owner:
            raise ConfigError(
                "OWNER",
                "Please set OWNER env var (the wallet address that sent the bridge).",
            )
        if not (0 < self.port < 65536):
            raise ConfigError("PORT", f"PORT must be between 1 and 65535, got {self.port}")
        if self.request_timeout_sec <= 0:
            raise ConfigError("REQUEST_TIMEOUT_SEC", "REQUEST_TIMEOUT_SEC must be positive")
        if self.log_format not in ("json", "console"):
            raise ConfigError("LOG_FORMAT", f"LOG_FORMAT must be json or console, got {self.log_format!r}")
        return self


def get_settings() -> Settings:
    """
    Return settings from the environment (.env loaded first).

    Does not validate; call Settings.validate() where a missing OWNER must stop the process.
    """
    load_autoscan_env()
    return Settings(
        owner=env_str("OWNER"),
        port=env_int("PORT", DEFAULT_PORT),
        host=env_str("HOST", "0.0.0.0"),
        lz_api_base=env_str("LZSCAN_API_BASE", TESTNET_API_BASE),
        lz_tx_base=env_str("LZSCAN_TX_BASE", TESTNET_TX_BASE),
        request_timeout_sec=env_float("REQUEST_TIMEOUT_SEC", DEFAULT_REQUEST_TIMEOUT_SEC),
        cors_origins=tuple(env_list("CORS_ORIGINS", ["*"])),
        log_level=env_str("LOG_LEVEL", "INFO"),
        log_format=env_str("LOG_FORMAT", "json"),
    )
