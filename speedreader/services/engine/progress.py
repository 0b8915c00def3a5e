"""Progress reporting and remaining-time formatting."""

import math

from .constants import ABSOLUTE_MIN_WPM, DEFAULT_WPM
from .timing import normalize_rate
from .types import ReadingProgress


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def format_time(seconds: float) -> str:
    """
    Format seconds as "m:ss".

    Seconds are rounded rather than truncated; a value that rounds up to a
    full minute rolls over instead of showing ":60".

    Examples:
        >>> format_time(59.6)
        '1:00'
        >>> format_time(125)
        '2:05'
    """
    total_seconds = max(0, round_half_up(seconds))
    minutes, secs = divmod(total_seconds, 60)
    return f"{minutes}:{secs:02d}"


def calculate_progress(
    index: int,
    total_words: int,
    wpm: float,
    *,
    strict: bool = False,
    default: float = DEFAULT_WPM,
    minimum: float = ABSOLUTE_MIN_WPM,
) -> ReadingProgress:
    """
    Build the progress snapshot for a playback position.

    Args:
        index: Current position in the token sequence.
        total_words: Length of the token sequence.
        wpm: Rate used for the remaining-time estimate.
        strict: Raise InvalidRateError for bad rates instead of clamping.
        default: Rate used when wpm is not finite.
        minimum: Smallest rate used for the estimate.

    Returns:
        ReadingProgress for the position.
    """
    rate = normalize_rate(wpm, strict=strict, default=default, minimum=minimum)

    if total_words > 0:
        percentage = round_half_up(index / total_words * 100)
    else:
        percentage = 0

    remaining_seconds = (total_words - index) / rate * 60

    return ReadingProgress(
        percentage=percentage,
        current_word=min(index + 1, total_words),
        total_words=total_words,
        remaining_time=format_time(remaining_seconds),
    )
