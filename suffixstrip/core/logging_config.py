"""Logging configuration for suffixstrip."""

import logging
from logging.handlers import RotatingFileHandler

from .constants import (
    LOGS_DIR,
    DEBUG_LOG_FILE,
    QUERY_LOG_FILE,
    DEBUG_LOG_MAX_BYTES,
    DEBUG_LOG_BACKUP_COUNT,
)

# Logger names
QUERY_LOGGER_NAME = "query"

# Format strings
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
QUERY_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _ensure_log_directory() -> None:
    """Create log directory if it doesn't exist."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging(debug_mode: bool = False) -> None:
    """
    Configure application logging.

    Sets up two log targets:
    1. Debug log: Rotating file handler with DEBUG level
    2. Query log: Append-only file recording each lookup

    Args:
        debug_mode: If True, also output DEBUG to console
    """
    _ensure_log_directory()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Debug file handler (rotating)
    debug_handler = RotatingFileHandler(
        DEBUG_LOG_FILE,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root_logger.addHandler(debug_handler)

    # Console handler (only in debug mode)
    if debug_mode:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        root_logger.addHandler(console_handler)

    # Configure query logger (separate logger with its own handler)
    query_logger = logging.getLogger(QUERY_LOGGER_NAME)
    query_logger.setLevel(logging.INFO)
    query_logger.propagate = False  # Don't send to root logger
    query_logger.handlers.clear()

    query_handler = logging.FileHandler(
        QUERY_LOG_FILE,
        mode="a",
        encoding="utf-8",
    )
    query_handler.setLevel(logging.INFO)
    query_handler.setFormatter(logging.Formatter(QUERY_FORMAT))
    query_logger.addHandler(query_handler)


def get_query_logger() -> logging.Logger:
    """Return the query logger instance."""
    return logging.getLogger(QUERY_LOGGER_NAME)


def log_query(operation: str, domain: str, result: str | None) -> None:
    """
    Record a single lookup in the query log.

    Args:
        operation: Name of the lookup (e.g., "strip", "suffix")
        domain: Domain as given by the caller
        result: Lookup result, None when there was none
    """
    get_query_logger().info(
        "%s | domain=%s | result=%s",
        operation.upper(),
        domain,
        result if result else "-",
    )
