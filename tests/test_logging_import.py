"""
Test that scan_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from scan_logging and use the logger."""
    from lz_autoscan.scan_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    logger.info("test_message", key="value")


def test_bind_owner():
    from lz_autoscan.scan_logging import bind_owner

    logger = bind_owner("0xabc", "test")
    logger.info("test_bound_message")


def test_configure_logging_reaches_existing_loggers(capsys):
    """A logger created before configure_logging() follows the new level and renderer."""
    import json

    from lz_autoscan.scan_logging import configure_logging, get_logger

    logger = get_logger("test.early")
    configure_logging("ERROR", "json")
    logger.warning("test_dropped")
    logger.error("test_kept", key="value")
    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event_type"] == "test_kept"
    assert record["logger"] == "test.early"
    assert record["level"] == "error"


def test_configure_logging_console_renderer():
    import structlog

    from lz_autoscan.scan_logging import configure_logging

    configure_logging("INFO", "console")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
    configure_logging("INFO", "json")
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
