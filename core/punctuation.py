"""
Classification of the punctuation characters that get relocated on RTL lines.
"""

from typing import AbstractSet

from utils.constants import MOVEABLE_CHARACTERS


def is_moveable(character: str, moveable_characters: AbstractSet[str] = MOVEABLE_CHARACTERS) -> bool:
    """Return True if ``character`` belongs to the moveable punctuation set."""
    return character in moveable_characters


def build_character_set(characters: str) -> frozenset:
    """
    Build a moveable set from a string of characters, e.g. a ``--chars`` value.

    Raises:
        ValueError: If the string is empty
    """
    if not characters:
        raise ValueError("Moveable character set cannot be empty")
    return frozenset(characters)
