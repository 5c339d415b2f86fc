"""
Core subtitle processing modules.

This package contains the fundamental components for fixing RTL subtitles:
- Punctuation classification and line fixing
- Subtitle block model and SBV codec
- Encoding detection
"""

from .punctuation import is_moveable, build_character_set
from .line_fixer import LineFixer, fix_line
from .subtitle_formats import SubtitleBlock, SBVCodec, SubtitleFormatFactory
from .encoding_detection import EncodingDetector

__all__ = [
    'is_moveable',
    'build_character_set',
    'LineFixer',
    'fix_line',
    'SubtitleBlock',
    'SBVCodec',
    'SubtitleFormatFactory',
    'EncodingDetector',
]
