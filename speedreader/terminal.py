"""Terminal rendering of RSVP output."""

import asyncio
import sys
from typing import Optional, TextIO

from speedreader.models.settings import ReaderSettings
from speedreader.services.controller import ReaderView
from speedreader.services.engine import ReadingProgress, WordParts

CLEAR_TO_END = "\x1b[K"


class TerminalView(ReaderView):
    """
    Redraws a single terminal line per word.

    The highlight character always lands in the same column, so the eye
    can stay fixed while words change around it.
    """

    def __init__(self, stream: Optional[TextIO] = None, anchor_column: int = 20):
        self.stream = stream or sys.stdout
        self.anchor_column = anchor_column
        self.highlight_focus = True
        self.fixation_point = False
        self.finished = asyncio.Event()
        self._parts = WordParts("", "", "")

    def apply_settings(self, settings: ReaderSettings) -> None:
        self.highlight_focus = settings.highlight_focus
        self.fixation_point = settings.fixation_point

    def render_word(self, parts: WordParts) -> str:
        """Lay out a word so its highlight sits at the anchor column."""
        padding = " " * max(0, self.anchor_column - len(parts.before))
        if self.highlight_focus and parts.highlight:
            return f"{padding}{parts.before}[{parts.highlight}]{parts.after}"
        return f"{padding}{parts.text}"

    def render_fixation(self) -> str:
        offset = 1 if self.highlight_focus else 0
        return " " * (self.anchor_column + offset) + "v"

    def render_progress(self, progress: ReadingProgress) -> str:
        return (
            f"{progress.current_word} of {progress.total_words} words"
            f" | {progress.remaining_time} remaining | {progress.percentage}%"
        )

    def show_fixation(self) -> None:
        if self.fixation_point:
            self.stream.write(self.render_fixation() + "\n")
            self.stream.flush()

    def show_word(self, parts: WordParts) -> None:
        self._parts = parts

    def show_progress(self, progress: ReadingProgress) -> None:
        word = self.render_word(self._parts).ljust(self.anchor_column * 2 + 2)
        self.stream.write(f"\r{word}  {self.render_progress(progress)}{CLEAR_TO_END}")
        self.stream.flush()

    def show_complete(self) -> None:
        self.stream.write("\n")
        self.stream.flush()
        self.finished.set()
