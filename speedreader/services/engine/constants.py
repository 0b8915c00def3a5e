"""
Engine constants for RSVP text processing and timing.

This module contains the patterns, punctuation sets and timing multipliers
used by the tokenizer, highlight and duration calculations.
"""

import re

# Fallback reading rate when no rate provider is attached
DEFAULT_WPM = 300

# Rate used for time-remaining estimates on static displays (restart / end)
DISPLAY_DEFAULT_WPM = 300

# Lower bound applied before dividing by a rate
ABSOLUTE_MIN_WPM = 1.0

MS_PER_MINUTE = 60_000.0

# -----------------------------------------------------------------------------
# Tokenizer Patterns
# -----------------------------------------------------------------------------

# Interior citation markers such as "[12]"
CITATION_PATTERN = re.compile(r"\[\d+\]")

# Absolute URLs and bare "www." addresses, up to the next whitespace
URL_PATTERN = re.compile(r"https?://\S*|(?<!\S)www\.\S*", re.IGNORECASE)

# -----------------------------------------------------------------------------
# Punctuation and Timing Multipliers
# -----------------------------------------------------------------------------

EM_DASH = "\u2014"

SENTENCE_END_MULTIPLIER = 2.0
CLAUSE_MULTIPLIER = 1.5
EM_DASH_MULTIPLIER = 1.3
HYPHEN_MULTIPLIER = 1.2

PUNCTUATION_MULTIPLIERS = {
    ".": SENTENCE_END_MULTIPLIER,
    "!": SENTENCE_END_MULTIPLIER,
    "?": SENTENCE_END_MULTIPLIER,
    ",": CLAUSE_MULTIPLIER,
    ";": CLAUSE_MULTIPLIER,
    ":": CLAUSE_MULTIPLIER,
    EM_DASH: EM_DASH_MULTIPLIER,
    "-": HYPHEN_MULTIPLIER,
}

# -----------------------------------------------------------------------------
# Brackets and Quotes
# -----------------------------------------------------------------------------

BRACKET_CLOSERS = {")", "]", "}"}

# Closing quotes (appear after word)
CLOSING_QUOTES = {
    '"',        # ASCII double quote
    "'",        # ASCII single quote
    '\u201d',   # right double quotation mark
    '\u201c',   # left double quotation mark (closing in some contexts)
    '\u2019',   # right single quotation mark
    '\u00bb',   # right-pointing double angle quotation mark
    '\u203a',   # single right-pointing angle quotation mark
}

# Characters to ignore when looking for terminal punctuation
TRAILING_CLOSERS = CLOSING_QUOTES | BRACKET_CLOSERS
