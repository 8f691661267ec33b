"""Logging configuration for the server, the catalog and the client."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import get_config


class DetailsFormatter(logging.Formatter):
    """Formatter that appends ``extra={"details": ...}`` as compact JSON."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        details = getattr(record, "details", None)
        if details:
            line = f"{line} | details={json.dumps(details, default=str, sort_keys=True)}"
        return line


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Optional[str] = None
) -> logging.Logger:
    """
    Configure a named logger once; later calls return it unchanged.

    Console output goes to stdout at INFO. When ``log_file`` is given and
    the environment is not production, a rotating file handler records
    everything from DEBUG up.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Optional log level (overrides config)

    Returns:
        Configured logger instance
    """
    config = get_config()

    logger = logging.getLogger(f"stockboard.{name}")
    logger.setLevel(getattr(logging, (level or config.logging.level).upper()))

    if logger.handlers:
        return logger

    formatter = DetailsFormatter(config.logging.format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Production containers log to stdout only.
    if log_file and not config.is_production:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.logging.max_bytes,
            backupCount=config.logging.backup_count
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_server_logger() -> logging.Logger:
    """Logger for GraphQL requests and server lifecycle."""
    return setup_logger("server", get_config().logging.files.server)


def get_catalog_logger() -> logging.Logger:
    """Logger for catalog mutations."""
    return setup_logger("catalog", get_config().logging.files.catalog)


def get_error_logger() -> logging.Logger:
    return setup_logger("error", get_config().logging.files.error, "ERROR")


def get_api_logger() -> logging.Logger:
    """Logger for client-side calls (HTTP client, dashboard, actions)."""
    return setup_logger("api")
