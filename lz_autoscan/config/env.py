"""
Environment variable loading for LayerZero Auto-Scan.

- OWNER: owner address whose sent messages are watched (required)
- LZSCAN_API_BASE: LayerZero Scan API base (default: testnet)
- LZSCAN_TX_BASE: LayerZero Scan transaction page base (default: testnet)
- Loads .env from project root when available; existing env vars win.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is lz_autoscan/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

TESTNET_API_BASE = "https://api.testnet.layerzeroscan.com"
TESTNET_TX_BASE = "https://testnet.layerzeroscan.com/tx"


def load_autoscan_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    load_dotenv(_ENV_PATH, override=False)


def env_str(name: str, default: str = "") -> str:
    """Return a stripped env var, or default when unset or blank."""
    raw = (os.getenv(name) or "").strip()
    return raw or default


def env_int(name: str, default: int) -> int:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def env_float(name: str, default: float) -> float:
    raw = env_str(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def env_list(name: str, default: list[str]) -> list[str]:
    """Comma-separated env var as a list of non-empty items."""
    raw = env_str(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]
