"""
Structured logging for LayerZero Auto-Scan.

JSON logs with timestamp, event_type and owner where relevant.
Use get_logger() in all modules; entrypoints call configure_logging() with Settings values.
"""

from lz_autoscan.scan_logging.logger import bind_owner, configure_logging, get_logger

__all__ = ["bind_owner", "configure_logging", "get_logger"]
