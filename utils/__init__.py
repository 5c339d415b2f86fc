"""
Utility modules.

This package contains shared utility functions and configurations:
- File I/O operations and backup utilities
- Logging configuration
- Shared constants and configurations
"""

from .file_operations import FileHandler
from .logging_config import setup_logging, get_logger
from .constants import (
    SubtitleFormat,
    SUBTITLE_EXTENSIONS,
    IGNORED_FILE_NAMES,
    SBV_LINE_SEPARATOR,
    SBV_BLOCK_SEPARATOR,
    SBV_TIMING_PATTERN,
    MOVEABLE_CHARACTERS,
    ELLIPSIS,
    ELLIPSIS_REPLACEMENT,
    ENCODING_PRIORITY,
    RTL_ENCODINGS,
    UTF8_BOM,
    DEFAULT_OUTPUT_SUFFIX,
    BACKUP_DIR_NAME,
    DEFAULT_MAX_WORKERS,
    FIXTURE_INPUT_NAME,
    FIXTURE_EXPECTED_NAME,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
)

__all__ = [
    'FileHandler',
    'setup_logging',
    'get_logger',
    'SubtitleFormat',
    'SUBTITLE_EXTENSIONS',
    'IGNORED_FILE_NAMES',
    'SBV_LINE_SEPARATOR',
    'SBV_BLOCK_SEPARATOR',
    'SBV_TIMING_PATTERN',
    'MOVEABLE_CHARACTERS',
    'ELLIPSIS',
    'ELLIPSIS_REPLACEMENT',
    'ENCODING_PRIORITY',
    'RTL_ENCODINGS',
    'UTF8_BOM',
    'DEFAULT_OUTPUT_SUFFIX',
    'BACKUP_DIR_NAME',
    'DEFAULT_MAX_WORKERS',
    'FIXTURE_INPUT_NAME',
    'FIXTURE_EXPECTED_NAME',
    'DEFAULT_LOG_FORMAT',
    'DEFAULT_LOG_DATE_FORMAT',
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
]
