"""
Main entrypoint: load settings (.env included), configure logging, run the FastAPI server.

Env: OWNER (required), PORT, HOST, LZSCAN_API_BASE, LZSCAN_TX_BASE, REQUEST_TIMEOUT_SEC,
CORS_ORIGINS, LOG_LEVEL, LOG_FORMAT. A .env file at the project root is read first.

API-only: uvicorn lz_autoscan.api_server.app:app --host 0.0.0.0 --port 3000
"""

import sys

from lz_autoscan.config import get_settings
from lz_autoscan.core.exceptions import ConfigError
from lz_autoscan.scan_logging import configure_logging, get_logger

logger = get_logger("main")


def main() -> None:
    """Load settings, refuse to start without OWNER, then serve until interrupted."""
    try:
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_format)
        settings.validate()
    except (ConfigError, ValueError) as e:
        logger.error(
            "main_config_error",
            setting=getattr(e, "setting", None),
            message=str(e),
        )
        sys.exit(1)

    from lz_autoscan.api_server.server import create_app
    import uvicorn

    app = create_app(settings)
    logger.info(
        "main_server_starting",
        host=settings.host,
        port=settings.port,
        owner=settings.owner,
        lz_api_base=settings.lz_api_base,
        log_format=settings.log_format,
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
