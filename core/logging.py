"""
Centralized logging configuration for the storefront API.

Usage:
    from core.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart updated")
    logger.error("Order placement failed", exc_info=True)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Client libraries that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "httpcore.http11", "httpcore.connection", "hpack")


def _get_log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Attach a stdout handler to the root logger unless one is already configured."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = _get_log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # Hosted logs already carry timestamps
    is_production = os.environ.get("APP_ENV") == "production"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if is_production else LOG_FORMAT))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)


def _escape_control_chars(value: str) -> str:
    """Neutralize newlines and control characters so client input cannot forge log lines."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Short, escaped prefix of a client-supplied identifier.

    Session ids and admin tokens are bearer values; only the first 8
    characters ever reach the logs.
    """
    if not id_value:
        return "N/A"
    safe_value = _escape_control_chars(str(id_value))
    return safe_value[:8]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escaped free text (search queries, product names) truncated to max_length."""
    if not value:
        return "N/A"
    safe_value = _escape_control_chars(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
