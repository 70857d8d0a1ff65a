"""
Logging for config_manager.

Usage:
    from config_manager.logger import get_logger, NullLogger

    logger = get_logger()
    logger.info("Configuration loaded")

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (CONFIG_MANAGER for
    the default "config-manager").
"""

import logging
import os
from typing import Mapping, Optional

from .interface import Logger
from .null_logger import NullLogger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

DEFAULT_LOGGER_NAME = "config-manager"


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "config-manager" -> "CONFIG_MANAGER"
        "billing-api" -> "BILLING_API"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Logger:
    """Create a new logger instance.

    Parameters left as None are read from ``{PREFIX}_LOG_LEVEL``,
    ``{PREFIX}_LOG_FILE`` and ``{PREFIX}_LOG_JSON`` in ``env`` (the process
    environment when not given).

    Args:
        name: Logger name
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON
        env: Environment mapping to read settings from

    Returns:
        A configured Logger instance
    """
    source = os.environ if env is None else env
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = source.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)

    if log_file is None:
        log_file = source.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = source.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Logger:
    """Get a logger configured from environment variables."""
    return create_logger(name=name)


__all__ = [
    "Logger",
    "NullLogger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "DEFAULT_LOGGER_NAME",
    "create_logger",
    "get_logger",
]
