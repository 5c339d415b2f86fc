"""
Punctuation relocation for right-to-left subtitle lines.

Players without bidirectional rendering (VLC with SBV files, for instance)
draw a Hebrew line such as "שלום!" with the exclamation mark on the wrong
side. Physically swapping the punctuation runs at both ends of the line makes
those players show the intended result:

    "שלום!"      ->  "!שלום"
    "וואו...!"   ->  "!...וואו"
    '"שלום" לך'  ->  'שלום" לך"'

Only the maximal runs at the physical ends move; punctuation inside the line
("גולגולת חשמלית, ארמון") is left alone.
"""

from typing import AbstractSet

from utils.constants import MOVEABLE_CHARACTERS
from .punctuation import is_moveable


class LineFixer:
    """Swaps the leading and trailing punctuation runs of single lines."""

    def __init__(self, moveable_characters: AbstractSet[str] = MOVEABLE_CHARACTERS):
        """
        Initialize the line fixer.

        Args:
            moveable_characters: Characters eligible for relocation
        """
        self.moveable_characters = frozenset(moveable_characters)
        self._strip_chars = ''.join(sorted(self.moveable_characters))

    def fix_line(self, line: str) -> str:
        """
        Move the trailing punctuation run to the front and the leading run to the back.

        Args:
            line: A single line of text, without line separators

        Returns:
            The fixed line. Lines whose characters are all moveable except
            possibly the last one (including one-character lines) are
            returned unchanged.

        Example:
            >>> LineFixer().fix_line("מה את משוגעת?!")
            '!?מה את משוגעת'
        """
        if not line:
            return ""

        last_index = len(line) - 1

        # Leading run
        first = ""
        i = 0
        while i < last_index and self.is_moveable(line[i]):
            first += line[i]
            i += 1

        if i == last_index:
            return line

        # Trailing run, nearest to the end first. A non-moveable character
        # exists at or after index i, so this never reaches the leading run.
        last = ""
        j = last_index
        while j > i and self.is_moveable(line[j]):
            last += line[j]
            j -= 1

        trimmed = line.strip(self._strip_chars)
        return last + trimmed + first

    def is_moveable(self, character: str) -> bool:
        return is_moveable(character, self.moveable_characters)


_default_fixer = LineFixer()


def fix_line(line: str) -> str:
    """Fix a line using the default moveable character set."""
    return _default_fixer.fix_line(line)
