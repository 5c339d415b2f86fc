"""
RTL punctuation conversion for SBV subtitle files.

This module ties the core together: it decodes SBV content into blocks, fixes
every text line and encodes the result. File conversion reads the whole file,
transforms it in memory and writes the output once.
"""

from pathlib import Path
from typing import AbstractSet, List, Optional

from core.line_fixer import LineFixer
from core.subtitle_formats import SBVCodec, SubtitleBlock, SubtitleFormatFactory
from utils.constants import (
    DEFAULT_OUTPUT_SUFFIX, ELLIPSIS, ELLIPSIS_REPLACEMENT, MOVEABLE_CHARACTERS, SBV_TIMING_PATTERN
)
from utils.file_operations import FileHandler
from utils.logging_config import get_logger

logger = get_logger(__name__)


class RTLFixError(Exception):
    """Raised when fixing a subtitle file fails."""
    pass


def normalize_ellipsis(text: str) -> str:
    """Replace every ellipsis glyph with three periods."""
    return text.replace(ELLIPSIS, ELLIPSIS_REPLACEMENT)


class RTLConverter:
    """Fixes right-to-left punctuation in SBV subtitle content and files."""

    def __init__(self, moveable_characters: AbstractSet[str] = MOVEABLE_CHARACTERS):
        """
        Initialize the converter.

        Args:
            moveable_characters: Characters relocated by the line fixer
        """
        self.fixer = LineFixer(moveable_characters)
        self.codec = SBVCodec

    def convert(self, content: str) -> str:
        """
        Fix the provided subtitle content and return the result.

        Args:
            content: SBV file content

        Returns:
            Fixed SBV content

        Example:
            >>> RTLConverter().convert("0:00:05.065,0:00:06.218\\nגארנט!")
            '0:00:05.065,0:00:06.218\\n!גארנט'
        """
        blocks = self.codec.decode(content)
        self._validate_blocks(blocks)
        for block in blocks:
            block.fix_text(self.fixer)
        return self.codec.encode(blocks)

    def convert_path(self, file_path: Path, normalize: bool = True) -> str:
        """
        Read a subtitle file and return its fixed content.

        Args:
            file_path: Path to the SBV file
            normalize: Replace ellipsis glyphs before fixing

        Returns:
            Fixed SBV content

        Raises:
            RTLFixError: If the file cannot be read or is not SBV
        """
        try:
            SubtitleFormatFactory.get_codec_for_path(file_path)
            content = FileHandler.read_text(file_path)
        except (IOError, ValueError) as e:
            raise RTLFixError(f"Cannot read {file_path}: {e}") from e

        if normalize:
            content = normalize_ellipsis(content)
        return self.convert(content)

    def convert_file(self, input_path: Path, output_path: Optional[Path] = None,
                     keep_backup: bool = False, normalize: bool = True) -> Path:
        """
        Fix a subtitle file and save the result.

        Args:
            input_path: Path to the input SBV file
            output_path: Output path (defaults to the input stem with the _rtl suffix)
            keep_backup: Back up an existing output file before replacing it
            normalize: Replace ellipsis glyphs before fixing

        Returns:
            Path to the output file

        Raises:
            RTLFixError: If reading or writing fails
        """
        logger.info(f"Fixing RTL in: {input_path.name}")

        if output_path is None:
            output_path = self.default_output_path(input_path)

        result = self.convert_path(input_path, normalize)

        try:
            FileHandler.safe_write(output_path, result, create_backup=keep_backup)
        except IOError as e:
            raise RTLFixError(f"Failed to write output file {output_path}: {e}") from e

        logger.info(f"RTL fix complete: {output_path.name}")
        return output_path

    @staticmethod
    def default_output_path(input_path: Path) -> Path:
        """Get the output path used when none is given."""
        return input_path.parent / f"{input_path.stem}{DEFAULT_OUTPUT_SUFFIX}{input_path.suffix}"

    def _validate_blocks(self, blocks: List[SubtitleBlock]) -> None:
        """Log a warning for timing lines that don't look like SBV timestamps."""
        invalid = [i for i, block in enumerate(blocks, 1)
                   if not SBV_TIMING_PATTERN.match(block.timing.strip())]
        if invalid:
            logger.warning(f"{len(invalid)} block(s) with unexpected timing line, "
                           f"first at block {invalid[0]}: {blocks[invalid[0] - 1].timing!r}")
