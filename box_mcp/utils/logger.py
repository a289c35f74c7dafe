"""
Logger Utility Module

This module provides functions for setting up and configuring the application logger.
"""

import logging
import sys
from typing import Optional

from box_mcp.utils.config import get_config_value

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_level() -> int:
    """
    Resolve the configured log level (``server.log_level`` in config.yaml).

    Returns:
        int: The logging level, INFO when unset or unrecognised.
    """
    level_name = str(get_config_value("log_level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Set up and configure a logger.

    Args:
        name (Optional[str], optional): The name of the logger. Defaults to "box_mcp".

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(name or "box_mcp")

    # Avoid adding duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    log_level = get_log_level()
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)
