"""
Timing calculations for RSVP reading.

This module provides the TimingCalculator class for computing how long a
word stays on screen: a base duration derived from the reading rate,
stretched by a multiplier chosen from the word's terminal punctuation.
"""

import logging
import math
from typing import Optional

from speedreader.exceptions import InvalidRateError

from .constants import (
    ABSOLUTE_MIN_WPM,
    DEFAULT_WPM,
    MS_PER_MINUTE,
    PUNCTUATION_MULTIPLIERS,
)
from .text_utils import get_terminal_punctuation

logger = logging.getLogger(__name__)


def normalize_rate(
    wpm: Optional[float],
    *,
    strict: bool = False,
    default: float = DEFAULT_WPM,
    minimum: float = ABSOLUTE_MIN_WPM,
) -> float:
    """
    Bring a reading rate into a range that is safe to divide by.

    Args:
        wpm: Requested words per minute. None selects the default.
        strict: Raise InvalidRateError instead of correcting bad rates.
        default: Rate used when wpm is None or not finite.
        minimum: Smallest rate allowed; lower values are raised to it.

    Returns:
        A positive, finite words-per-minute value.

    Raises:
        InvalidRateError: In strict mode, for non-positive or non-finite rates.
    """
    if wpm is None:
        return float(default)

    if not math.isfinite(wpm) or wpm <= 0:
        if strict:
            raise InvalidRateError(wpm)
        if not math.isfinite(wpm):
            logger.warning("Non-finite rate %r replaced by default %s WPM", wpm, default)
            return float(default)

    if wpm < minimum:
        logger.warning("Rate %r WPM raised to minimum %s WPM", wpm, minimum)
        return float(minimum)

    return float(wpm)


def calculate_base_duration_ms(wpm: float, *, strict: bool = False) -> float:
    """
    Calculate the base word display duration from WPM (words per minute).

    Args:
        wpm: Target reading speed in words per minute.
        strict: Raise on non-positive or non-finite rates instead of clamping.

    Returns:
        Base duration in milliseconds for one word.

    Examples:
        >>> calculate_base_duration_ms(300)
        200.0
        >>> calculate_base_duration_ms(600)
        100.0
    """
    return MS_PER_MINUTE / normalize_rate(wpm, strict=strict)


class TimingCalculator:
    """
    Calculate display durations for RSVP words.

    Factors that affect timing:
    - Sentence enders (. ! ?) double the base duration
    - Clause separators (, ; :) add half again
    - A trailing em dash or hyphen adds a shorter pause

    Closing quotes and brackets are skipped when looking for the final
    punctuation, so '"word,"' and "(end)." pause like "word," and "end.".

    Example usage:
        >>> calc = TimingCalculator()
        >>> calc.calculate_duration_ms("word.", 300)
        400.0
        >>> calc.calculate_duration_ms('word."', 300)
        400.0
    """

    def __init__(self, strict: bool = False) -> None:
        """
        Initialize the timing calculator.

        Args:
            strict: Raise InvalidRateError for bad rates instead of clamping.
        """
        self.strict = strict

    def calculate_multiplier(self, word: str) -> float:
        """
        Calculate the punctuation multiplier for a word.

        Args:
            word: The original token, punctuation included.

        Returns:
            Delay multiplier (1.0 = normal, >1.0 = longer display time).
        """
        terminal = get_terminal_punctuation(word)
        if terminal is None:
            return 1.0
        return PUNCTUATION_MULTIPLIERS.get(terminal, 1.0)

    def calculate_duration_ms(self, word: str, wpm: float) -> float:
        """
        Calculate the display duration for a word, unrounded.

        Args:
            word: The original token, punctuation included.
            wpm: Reading speed in words per minute.

        Returns:
            Display duration in milliseconds.
        """
        base_duration = calculate_base_duration_ms(wpm, strict=self.strict)
        return base_duration * self.calculate_multiplier(word)
