"""
FastAPI/ASGI application entrypoint.

Builds the app from environment settings (.env included) and applies LOG_LEVEL/LOG_FORMAT;
import fails with ConfigError when OWNER is unset.
Run with: uvicorn lz_autoscan.api_server.app:app --host 0.0.0.0 --port 3000
"""

from lz_autoscan.api_server.server import create_app
from lz_autoscan.config import get_settings
from lz_autoscan.scan_logging import configure_logging

_settings = get_settings()
configure_logging(_settings.log_level, _settings.log_format)

app = create_app(_settings.validate())

__all__ = ["app"]
