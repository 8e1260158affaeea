"""Centralized logging configuration for persistconf."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .api.config.LogConfig import LogConfig

# LogConfig.level -> stdlib level
LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Configure logging for persistconf.

    Args:
        level: Logging level (default INFO)
        log_file: Optional path to a log file; stderr only when omitted
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_string, handlers=handlers, force=True)

    # Suppress noisy third-party loggers
    logging.getLogger('pymongo').setLevel(logging.WARNING)


def level_from_config(log_config: LogConfig) -> int:
    """Map a LogConfig level name to a stdlib logging level."""
    return LEVELS[log_config.level]


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"persistconf.{name}")
