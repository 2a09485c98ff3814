"""Logging configuration for typedcache.

The library modules only create module-level loggers; handlers are attached
here, once, by the composition root. Log lines go to stderr so they never mix
with command output, and optionally to a file.
"""

import logging
import sys
from typing import Optional

from typedcache.infrastructure.config.settings import get_config

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVEL_KEY = "logging.level"
FORMAT_KEY = "logging.format"
FILE_KEY = "logging.file"


def parse_log_level(name: Optional[str], default: int = DEFAULT_LOG_LEVEL) -> int:
    """Maps a level name such as 'debug' to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def _build_handlers(log_file: Optional[str]) -> list:
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
        except OSError as e:
            # Falls back to console-only logging
            logging.getLogger(__name__).error(f"Cannot open log file {log_file}: {e}")
    return handlers


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None,
) -> None:
    """Replaces the root logger's handlers with a stderr handler and an optional file handler.

    Args:
        log_level: The minimum logging level (e.g., logging.DEBUG).
        log_format: The format string for log messages.
        log_file: Optional path to a file that also receives log output.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)
    for handler in _build_handlers(log_file):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging configured. Level={logging.getLevelName(log_level)}, file={log_file or '-'}"
    )


def setup_logging_from_config() -> None:
    """Configures logging from the logging.level, logging.format and logging.file settings."""
    setup_logging(
        log_level=parse_log_level(get_config(LEVEL_KEY)),
        log_format=get_config(FORMAT_KEY) or DEFAULT_LOG_FORMAT,
        log_file=get_config(FILE_KEY),
    )
