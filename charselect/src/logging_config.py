"""
Logging configuration for the character preview.

Provides structured logging with configurable levels and output formats.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from .config import get_config

ROOT_LOGGER_NAME = "charselect"


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    log_to_console: bool = True
) -> logging.Logger:
    """
    Configure logging for the preview.

    Args:
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR). Uses config if not specified.
        log_file: Optional path to log file
        log_to_console: Whether to log to console

    Returns:
        The root logger for the preview
    """
    # Get log level from config or parameter
    if log_level is None:
        config = get_config()
        log_level = config.debug.log_level

    # Convert string to level
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_with_context(logger: logging.Logger, level: int, msg: str, **context) -> None:
    """
    Log a message with key=value context appended.

    Example:
        log_with_context(logger, logging.INFO, "Pool resolved", class_name="Mage", frames=4)
        # -> "Pool resolved [class_name=Mage | frames=4]"
    """
    context_str = " | ".join(f"{k}={v}" for k, v in context.items())
    if context_str:
        msg = f"{msg} [{context_str}]"

    logger.log(level, msg)
