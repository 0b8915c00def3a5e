"""
Shared text processing utilities for the engine package.

These functions provide common operations used by the highlight and
duration calculations.
"""

from typing import Optional

from .constants import TRAILING_CLOSERS

_TRAILING_CLOSER_CHARS = "".join(sorted(TRAILING_CLOSERS))


def clean_word(word: str) -> str:
    """
    Remove every non-alphanumeric character from a word.

    Args:
        word: The word to clean.

    Returns:
        The letters and digits of the word, in order.

    Examples:
        >>> clean_word('"Hello,"')
        'Hello'
        >>> clean_word("don't")
        'dont'
    """
    return "".join(char for char in word if char.isalnum())


def get_clean_word_length(word: str) -> int:
    """Count the alphanumeric characters of a word."""
    return sum(1 for char in word if char.isalnum())


def get_terminal_punctuation(word: str) -> Optional[str]:
    """
    Get the last significant character, ignoring trailing quotes/brackets.

    Args:
        word: The word to check.

    Returns:
        The final character after closing quotes and brackets are stripped,
        or None when nothing remains.

    Examples:
        >>> get_terminal_punctuation('said."')
        '.'
        >>> get_terminal_punctuation("(end).")
        '.'
        >>> get_terminal_punctuation('"')
        None
    """
    stripped = word.rstrip(_TRAILING_CLOSER_CHARS)
    if not stripped:
        return None
    return stripped[-1]
