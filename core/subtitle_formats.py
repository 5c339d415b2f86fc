"""
Subtitle format handlers and data structures.

This module provides:
- The subtitle block data structure (timing line plus text lines)
- The SBV codec turning file text into blocks and back
- Format lookup by file extension
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from utils.constants import SubtitleFormat, SBV_LINE_SEPARATOR, SBV_BLOCK_SEPARATOR
from utils.logging_config import get_logger
from .line_fixer import LineFixer

logger = get_logger(__name__)


@dataclass
class SubtitleBlock:
    """Represents a single subtitle cue: an opaque timing line and its text."""
    timing: str  # First line of the block, never transformed
    text: str    # Remaining lines joined with SBV_LINE_SEPARATOR

    @classmethod
    def parse(cls, block_text: str) -> 'SubtitleBlock':
        """
        Build a block from its raw text.

        The first line becomes the timing; everything after the first line
        separator becomes the text. A block without a separator has empty text.
        """
        timing, _, text = block_text.partition(SBV_LINE_SEPARATOR)
        return cls(timing=timing, text=text)

    def lines(self) -> List[str]:
        """Get the text lines of this block."""
        return self.text.split(SBV_LINE_SEPARATOR)

    def fix_text(self, fixer: Optional[LineFixer] = None) -> None:
        """
        Fix every text line in place.

        Args:
            fixer: Line fixer to apply (default character set if None)
        """
        fixer = fixer or LineFixer()
        self.text = SBV_LINE_SEPARATOR.join(fixer.fix_line(line) for line in self.lines())


class SBVCodec:
    """Reads and writes the block-delimited SBV subtitle format."""

    @staticmethod
    def normalize_line_endings(text: str) -> str:
        """Replace Windows (CRLF) and old Mac (CR) line endings with LF."""
        return text.replace('\r\n', '\n').replace('\r', '\n')

    @staticmethod
    def decode(file_text: str) -> List[SubtitleBlock]:
        """
        Parse SBV file content into blocks.

        Args:
            file_text: Whole file content

        Returns:
            Blocks in file order

        Example:
            >>> blocks = SBVCodec.decode("0:00:01.000,0:00:02.000\\nשלום!")
            >>> blocks[0].timing
            '0:00:01.000,0:00:02.000'
        """
        text = SBVCodec.normalize_line_endings(file_text)
        if not text:
            return []
        blocks = [SubtitleBlock.parse(chunk) for chunk in text.split(SBV_BLOCK_SEPARATOR)]
        logger.debug(f"Decoded {len(blocks)} SBV blocks")
        return blocks

    @staticmethod
    def encode(blocks: Iterable[SubtitleBlock]) -> str:
        """
        Serialize blocks into SBV file content.

        Each block is written as its timing, a line separator and its text;
        blocks are separated by a blank line and no separator follows the
        last block.

        Args:
            blocks: Blocks to write, in order

        Returns:
            File content with LF line endings
        """
        return SBV_BLOCK_SEPARATOR.join(
            f"{block.timing}{SBV_LINE_SEPARATOR}{block.text}" for block in blocks
        )


class SubtitleFormatFactory:
    """Factory class for looking up subtitle codecs."""

    _codecs = {
        SubtitleFormat.SBV: SBVCodec,
    }

    @classmethod
    def get_codec(cls, format_type: SubtitleFormat) -> type:
        """
        Get the codec for the specified format.

        Raises:
            ValueError: If format is not supported
        """
        if format_type not in cls._codecs:
            raise ValueError(f"Unsupported subtitle format: {format_type}")
        return cls._codecs[format_type]

    @classmethod
    def get_codec_for_path(cls, file_path: Path) -> type:
        """
        Get the codec matching the extension of a file.

        Raises:
            ValueError: If the extension is not supported
        """
        try:
            format_type = SubtitleFormat.from_extension(file_path.suffix)
        except ValueError as e:
            raise ValueError(f"Unsupported file extension: {file_path.suffix or file_path.name}") from e
        return cls.get_codec(format_type)
