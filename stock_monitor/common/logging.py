"""Logging configuration for Stock Monitor.

Feature modules take their logger from ``get_logger``, which namespaces it
under ``stock_monitor`` and honours the ``LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import sys


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "stock_monitor",
) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        level: Logging level (default INFO).
        module_name: Name for the logger instance.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a feature module, e.g. ``get_logger("insight")``.

    The level is read from ``LOG_LEVEL`` (a standard level name); unknown
    or missing values fall back to INFO.
    """
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
    if not isinstance(level, int):
        level = logging.INFO
    return setup_logging(level=level, module_name=f"stock_monitor.{name}")
