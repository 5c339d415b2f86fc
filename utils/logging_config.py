"""
Logging configuration for the RTL subtitle fixer.

All module loggers hang off the ``sbv_fixer`` logger, so a single call to
``setup_logging`` decides where every message of the application goes.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from .constants import DEFAULT_LOG_FORMAT, DEFAULT_LOG_DATE_FORMAT

ROOT_LOGGER_NAME = "sbv_fixer"


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        # Copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def _make_formatter(colored: bool) -> logging.Formatter:
    formatter_class = ColoredFormatter if colored else logging.Formatter
    return formatter_class(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
    logger_name: str = ROOT_LOGGER_NAME
) -> logging.Logger:
    """
    Install the console handler, and optionally a file handler, on the
    application logger.

    Calling it again replaces the handlers of the previous call, so the CLI
    can reconfigure logging once per command.

    Args:
        level: Logging level for the logger and its handlers
        log_file: Optional path of a UTF-8 log file
        use_colors: Colour level names when stdout is a terminal
        logger_name: Logger to configure

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging(logging.DEBUG, Path("sbvfix.log"))
        >>> logger.info("Application started")
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_make_formatter(use_colors and sys.stdout.isatty()))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(_make_formatter(False))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger placed under the application logger.

    Args:
        name: Logger name, usually ``__name__`` of the calling module
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
