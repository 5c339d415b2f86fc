"""
Encoding detection utilities for subtitle files.

This module provides encoding detection with a focus on UTF-8 and the legacy
right-to-left code pages (Hebrew, Arabic) that older subtitle files use.
"""

from pathlib import Path
from typing import Optional, Tuple

from charset_normalizer import from_path as detect_charset_normalizer

from utils.constants import ENCODING_PRIORITY, RTL_ENCODINGS, UTF8_BOM
from utils.logging_config import get_logger

logger = get_logger(__name__)


class EncodingDetector:
    """Handles encoding detection for subtitle files with right-to-left support."""

    @staticmethod
    def detect_encoding(file_path: Path) -> Optional[str]:
        """
        Detect the encoding of a text file using multiple methods.

        Args:
            file_path: Path to the file to analyze

        Returns:
            Detected encoding name or None if detection failed

        Example:
            >>> encoding = EncodingDetector.detect_encoding(Path("episode.sbv"))
            >>> print(f"Detected encoding: {encoding}")
        """
        if EncodingDetector.has_bom(file_path):
            return 'utf-8-sig'

        # Plain UTF-8 is the expected case, don't let detection second-guess it
        if EncodingDetector._decodes_as(file_path, 'utf-8'):
            return 'utf-8'

        detected = EncodingDetector._auto_detect_encoding(file_path)
        if detected:
            logger.debug(f"Auto-detected encoding for {file_path.name}: {detected}")
            return detected.lower()

        logger.debug(f"Auto-detection failed for {file_path.name}, trying manual detection")
        return EncodingDetector._manual_detect_encoding(file_path)

    @staticmethod
    def _auto_detect_encoding(file_path: Path) -> Optional[str]:
        """Use charset-normalizer to guess the encoding."""
        try:
            result = detect_charset_normalizer(file_path)
            best = result.best() if result else None
            if best:
                return best.encoding
        except (OSError, LookupError) as e:
            logger.debug(f"charset-normalizer detection failed: {e}")
        return None

    @staticmethod
    def _manual_detect_encoding(file_path: Path) -> Optional[str]:
        """
        Manually detect encoding by trying the right-to-left code pages first.

        Args:
            file_path: Path to the file

        Returns:
            Detected encoding or None
        """
        for encoding in RTL_ENCODINGS:
            try:
                content = file_path.read_text(encoding=encoding)
            except (UnicodeDecodeError, LookupError):
                continue
            if EncodingDetector._has_rtl_characters(content):
                logger.debug(f"Manual detection successful for {file_path.name}: {encoding}")
                return encoding

        remaining_encodings = [enc for enc in ENCODING_PRIORITY if enc not in RTL_ENCODINGS]
        for encoding in remaining_encodings:
            if EncodingDetector._decodes_as(file_path, encoding):
                logger.debug(f"Manual detection successful for {file_path.name}: {encoding}")
                return encoding

        logger.warning(f"Could not detect encoding for {file_path}")
        return None

    @staticmethod
    def _decodes_as(file_path: Path, encoding: str) -> bool:
        try:
            file_path.read_text(encoding=encoding)
            return True
        except (UnicodeDecodeError, LookupError):
            return False

    @staticmethod
    def _has_rtl_characters(text: str) -> bool:
        """
        Check if text contains Hebrew or Arabic letters.

        Args:
            text: Text to analyze

        Returns:
            True if right-to-left characters are found
        """
        rtl_ranges = [
            (0x0590, 0x05FF),   # Hebrew
            (0x0600, 0x06FF),   # Arabic
            (0xFB1D, 0xFB4F),   # Hebrew presentation forms
            (0xFB50, 0xFDFF),   # Arabic presentation forms A
        ]

        for char in text:
            char_code = ord(char)
            for start, end in rtl_ranges:
                if start <= char_code <= end:
                    return True
        return False

    @staticmethod
    def read_file_with_encoding(file_path: Path) -> Tuple[str, str]:
        """
        Read a file with automatic encoding detection and proper BOM handling.

        Args:
            file_path: Path to the file to read

        Returns:
            Tuple of (file_content, encoding_used)

        Raises:
            IOError: If file cannot be read with any encoding

        Example:
            >>> content, encoding = EncodingDetector.read_file_with_encoding(Path("episode.sbv"))
            >>> print(f"Read file with {encoding} encoding")
        """
        try:
            encoding = EncodingDetector.detect_encoding(file_path)
        except OSError as e:
            raise IOError(f"Cannot read file {file_path}: {e}") from e

        if not encoding:
            raise IOError(f"Cannot detect encoding of {file_path}")

        try:
            content = file_path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise IOError(f"Cannot read file {file_path} with encoding {encoding}: {e}") from e

        return content, encoding

    @staticmethod
    def has_bom(file_path: Path) -> bool:
        """
        Check if file has UTF-8 BOM.

        Args:
            file_path: Path to the file

        Returns:
            True if file has UTF-8 BOM
        """
        with open(file_path, 'rb') as f:
            return f.read(len(UTF8_BOM)) == UTF8_BOM
