"""
Application-level exceptions.

Upstream failures (LayerZero Scan unreachable, non-2xx) are not exceptions here:
the scan client reports them as unavailable UpstreamResult values. These types
cover configuration and programming errors that should stop a request or the process.
"""

from __future__ import annotations


class AutoScanError(Exception):
    """Base class for all LayerZero Auto-Scan errors."""


class ConfigError(AutoScanError):
    """Required configuration is missing or invalid (e.g. OWNER unset)."""

    def __init__(self, setting: str, message: str) -> None:
        super().__init__(message)
        self.setting = setting
