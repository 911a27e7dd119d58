"""
Configuration management for LayerZero Auto-Scan.

Loads settings from environment variables and the project .env file.
Exposes a single source of truth for all service configuration.
"""

from lz_autoscan.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
