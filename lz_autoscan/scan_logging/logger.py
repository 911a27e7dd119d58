"""
structlog setup for LayerZero Auto-Scan.

Every line carries event_type, level, logger and a UTC ISO timestamp.
Level and renderer come from Settings (LOG_LEVEL / LOG_FORMAT, .env included):
main.py and the ASGI entrypoint call configure_logging() once settings are
loaded. Until then a JSON/INFO default is active so imports can log.

Loggers from get_logger() stay lazy, so module-level loggers pick up the
configuration applied later. No lz_autoscan imports here (import cycles).
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "json"
LOG_FORMATS = ("json", "console")


def _stamp_and_rename(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """UTC timestamp, and structlog's 'event' key exposed as event_type/message."""
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    event_dict.setdefault("message", str(event_dict.get("event_type", "")))
    return event_dict


def _level_value(level: str) -> int:
    value = logging.getLevelName((level or DEFAULT_LEVEL).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = DEFAULT_LEVEL, fmt: str = DEFAULT_FORMAT) -> None:
    """
    (Re)configure structlog.

    level: stdlib level name (DEBUG, INFO, WARNING, ...); unknown names mean INFO.
    fmt: "console" for the colored dev renderer, anything else renders JSON.
    """
    renderer: Any
    if (fmt or "").strip().lower() == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    else:
        renderer = structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _stamp_and_rename,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        # Off so configure_logging() after import still reaches existing loggers
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> Any:
    """
    Lazy structured logger for a module:

        logger = get_logger(__name__)
        logger.warning("lz_api_error", status_code=502, url=url)

    JSON: {"event_type": "lz_api_error", "status_code": 502, "url": "...",
    "logger": "lz_autoscan.scanner.client", "level": "warning", "timestamp": "..."}
    """
    return structlog.get_logger(name, logger=name)


def bind_owner(owner: str, name: str = "lz_autoscan") -> Any:
    """Logger with the watched owner bound to every call (resolved against the current config)."""
    return get_logger(name).bind(owner=owner)
