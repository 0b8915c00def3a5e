"""Collaborator interface through which the engine reports and pulls state."""

from dataclasses import dataclass
from typing import Callable, Optional

from .types import ReadingProgress, WordParts


class ReaderListener:
    """
    Receives engine output and supplies the live reading rate.

    Every method is optional: the defaults ignore emissions and return no
    rate, in which case the engine falls back to its default rate.
    """

    def on_word_change(self, parts: WordParts) -> None:
        pass

    def on_progress(self, progress: ReadingProgress) -> None:
        pass

    def on_complete(self) -> None:
        pass

    def current_rate(self) -> Optional[float]:
        """Words per minute for the next word, or None for the default."""
        return None


@dataclass
class CallbackListener(ReaderListener):
    """ReaderListener assembled from plain callables; any may be omitted."""

    word_change: Optional[Callable[[WordParts], None]] = None
    progress: Optional[Callable[[ReadingProgress], None]] = None
    complete: Optional[Callable[[], None]] = None
    rate: Optional[Callable[[], Optional[float]]] = None

    def on_word_change(self, parts: WordParts) -> None:
        if self.word_change is not None:
            self.word_change(parts)

    def on_progress(self, progress: ReadingProgress) -> None:
        if self.progress is not None:
            self.progress(progress)

    def on_complete(self) -> None:
        if self.complete is not None:
            self.complete()

    def current_rate(self) -> Optional[float]:
        if self.rate is None:
            return None
        return self.rate()
