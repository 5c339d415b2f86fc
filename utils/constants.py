"""
Shared constants and configurations for the RTL subtitle fixer.

This module contains all the constants used across different modules including:
- Supported file formats and extensions
- The moveable punctuation set used by the line fixer
- Encoding detection priorities
- Default configuration values
"""

import re
from enum import Enum
from typing import FrozenSet, Set, List

# ============================================================================
# FILE FORMAT CONSTANTS
# ============================================================================

class SubtitleFormat(Enum):
    """Supported subtitle formats."""
    SBV = "sbv"

    @classmethod
    def from_extension(cls, ext: str) -> 'SubtitleFormat':
        """
        Get format from file extension.

        Args:
            ext: File extension (with or without dot)

        Returns:
            SubtitleFormat enum value

        Raises:
            ValueError: If extension is not supported
        """
        ext = ext.lower().lstrip('.')
        for format_type in cls:
            if format_type.value == ext:
                return format_type
        raise ValueError(f"Unsupported subtitle format: {ext}")

# Supported subtitle file extensions
SUBTITLE_EXTENSIONS: Set[str] = {'.sbv'}

# Directory entries never converted nor recursed into
IGNORED_FILE_NAMES: Set[str] = {'.DS_Store', 'Thumbs.db', 'desktop.ini'}

# ============================================================================
# SBV LAYOUT CONSTANTS
# ============================================================================

# Canonical line separator inside and between blocks
SBV_LINE_SEPARATOR: str = '\n'

# Blank line between two blocks
SBV_BLOCK_SEPARATOR: str = SBV_LINE_SEPARATOR * 2

# Expected timing line, e.g. "0:00:02.367,0:00:03.830"
SBV_TIMING_PATTERN = re.compile(r'^\d+:\d{2}:\d{2}\.\d{3},\d+:\d{2}:\d{2}\.\d{3}$')

# ============================================================================
# PUNCTUATION CONSTANTS
# ============================================================================

# Characters relocated between the two ends of a right-to-left line:
# quotation mark, exclamation mark, comma, period, hyphen, question mark,
# colon, semicolon, apostrophe, Hebrew gershayim and horizontal ellipsis.
MOVEABLE_CHARACTERS: FrozenSet[str] = frozenset("\"!,.-?:;'״…")

ELLIPSIS: str = '…'
ELLIPSIS_REPLACEMENT: str = '...'

# ============================================================================
# ENCODING DETECTION CONSTANTS
# ============================================================================

# Subtitle file encoding detection order (most likely first)
ENCODING_PRIORITY: List[str] = [
    'utf-8-sig', 'utf-8', 'cp1255', 'iso-8859-8', 'cp1256', 'latin-1'
]

# Legacy right-to-left code pages to try when detection fails
RTL_ENCODINGS: List[str] = [
    'cp1255',      # Hebrew (Windows)
    'iso-8859-8',  # Hebrew (ISO)
    'cp1256',      # Arabic (Windows)
    'iso-8859-6',  # Arabic (ISO)
]

# UTF-8 BOM marker
UTF8_BOM: bytes = b"\xef\xbb\xbf"

# ============================================================================
# DEFAULT CONFIGURATION VALUES
# ============================================================================

# Suffix appended to the stem of a fixed file when no output path is given
DEFAULT_OUTPUT_SUFFIX: str = "_rtl"

# Default backup directory name
BACKUP_DIR_NAME: str = "subtitle_backups"

# Default number of worker threads for parallel batch runs
DEFAULT_MAX_WORKERS: int = 4

# Known input/output pair used by the self-test
FIXTURE_INPUT_NAME: str = "original.sbv"
FIXTURE_EXPECTED_NAME: str = "result.sbv"

# Default log format
DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

# Application metadata
APP_NAME: str = "RTL SBV Fixer"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = """
Fixes right-to-left (Hebrew, Arabic, ...) SBV subtitles for players such as VLC
that do not apply bidirectional rendering:
- Moves trailing punctuation to the start of each line and leading to the end
- Converts single files or whole folder trees
- Self-test against a known input/output pair
"""
