"""
Tokenization of raw text into the RSVP word sequence.

Citation markers such as ``[12]`` and absolute URLs are removed before the
text is split on whitespace, so neither ever reaches the display.

Example usage:
    >>> tokenize("See [3] https://example.com now.")
    ('See', 'now.')
"""

from typing import Tuple

from .constants import CITATION_PATTERN, URL_PATTERN


def strip_citations_and_urls(text: str) -> str:
    """
    Remove citation markers and absolute URLs from text.

    Args:
        text: Raw input text.

    Returns:
        The text with every "[digits]" marker and URL removed.
    """
    text = CITATION_PATTERN.sub("", text)
    return URL_PATTERN.sub("", text)


def tokenize(text: str) -> Tuple[str, ...]:
    """
    Split text into the immutable word sequence shown one word at a time.

    Args:
        text: Raw input text. Empty or whitespace-only text yields ().

    Returns:
        Tuple of maximal non-whitespace runs, in reading order.
    """
    if not text:
        return ()
    return tuple(strip_citations_and_urls(text).split())


def count_words(text: str) -> int:
    """
    Count whitespace-separated words without stripping citations or URLs.

    This is the lightweight count shown while text is being entered.
    """
    return len(text.split())
