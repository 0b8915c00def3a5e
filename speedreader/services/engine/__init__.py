"""
RSVP engine package.

This package contains the playback core of the speed reader:
- tokenizer: Raw text to word sequence (citations and URLs removed)
- orp: Optimal Recognition Point highlight and word split
- timing: Per-word durations from rate and punctuation
- progress: Progress snapshots and remaining-time formatting
- scheduler: RSVPEngine, the drift-corrected playback state machine
- hooks: ReaderListener interface for collaborators

Primary usage:
    >>> from speedreader.services.engine import RSVPEngine, CallbackListener
    >>> engine = RSVPEngine(CallbackListener(word_change=print, rate=lambda: 450))
    >>> engine.init("Hello world.")
"""

from .constants import (
    DEFAULT_WPM,
    DISPLAY_DEFAULT_WPM,
    PUNCTUATION_MULTIPLIERS,
    TRAILING_CLOSERS,
)
from .hooks import CallbackListener, ReaderListener
from .orp import ORPCalculator
from .progress import calculate_progress, format_time
from .scheduler import RSVPEngine
from .timing import TimingCalculator, calculate_base_duration_ms, normalize_rate
from .tokenizer import count_words, strip_citations_and_urls, tokenize
from .types import ReadingProgress, WordParts

__all__ = [
    # Engine
    "RSVPEngine",
    "ReaderListener",
    "CallbackListener",
    # Text processing
    "tokenize",
    "strip_citations_and_urls",
    "count_words",
    "ORPCalculator",
    # Timing and progress
    "TimingCalculator",
    "calculate_base_duration_ms",
    "normalize_rate",
    "calculate_progress",
    "format_time",
    # Value types
    "WordParts",
    "ReadingProgress",
    # Constants
    "DEFAULT_WPM",
    "DISPLAY_DEFAULT_WPM",
    "PUNCTUATION_MULTIPLIERS",
    "TRAILING_CLOSERS",
]
