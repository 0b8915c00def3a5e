"""SpeedReader: RSVP playback engine and terminal reader."""

from speedreader.services.engine import (
    CallbackListener,
    ReaderListener,
    ReadingProgress,
    RSVPEngine,
    WordParts,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "CallbackListener",
    "ReaderListener",
    "ReadingProgress",
    "RSVPEngine",
    "WordParts",
    "tokenize",
    "__version__",
]
