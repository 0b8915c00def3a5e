"""
Drift-corrected RSVP playback engine.

The engine walks a token sequence one word at a time on an asyncio event
loop. Each step pulls the live reading rate, computes the word's duration
and waits that long minus any latency accumulated so far, so scheduling
jitter is absorbed by later waits instead of slowing the reading rate.

Example usage:
    >>> engine = RSVPEngine(CallbackListener(word_change=print))
    >>> engine.init("Hello, world.")
    >>> engine.play()  # inside a running event loop
"""

import asyncio
import logging
from typing import Optional, Tuple

from speedreader.config import Settings
from speedreader.exceptions import InvalidRateError
from speedreader.models.enums import PlaybackState

from .constants import ABSOLUTE_MIN_WPM, DEFAULT_WPM, DISPLAY_DEFAULT_WPM
from .hooks import ReaderListener
from .orp import ORPCalculator
from .progress import calculate_progress
from .timing import TimingCalculator, normalize_rate
from .tokenizer import tokenize
from .types import ReadingProgress

logger = logging.getLogger(__name__)


class RSVPEngine:
    """
    Playback state machine for one reading session.

    States are stopped, playing and paused. At most one step is pending on
    the event loop at any time; every transition out of playing cancels it,
    and a cancelled step never runs.
    """

    def __init__(
        self,
        listener: Optional[ReaderListener] = None,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        default_wpm: float = DEFAULT_WPM,
        display_default_wpm: float = DISPLAY_DEFAULT_WPM,
        min_wpm: float = ABSOLUTE_MIN_WPM,
        strict: bool = False,
    ) -> None:
        """
        Initialize the engine.

        Args:
            listener: Receives emissions and supplies the live rate.
            loop: Event loop used for scheduling. Defaults to the loop
                  running when play() is called.
            default_wpm: Rate used when the listener supplies none.
            display_default_wpm: Rate for the time estimate shown by
                                 restart() and go_to_end().
            min_wpm: Lowest rate honoured; slower rates are raised to it.
            strict: Raise InvalidRateError for bad rates instead of clamping.
        """
        self._listener = listener or ReaderListener()
        self._loop = loop
        self._active_loop: Optional[asyncio.AbstractEventLoop] = loop
        self.default_wpm = default_wpm
        self.display_default_wpm = display_default_wpm
        self.min_wpm = min_wpm
        self.strict = strict

        self._orp_calculator = ORPCalculator()
        self._timing_calculator = TimingCalculator(strict=strict)

        self._words: Tuple[str, ...] = ()
        self._index = 0
        self._state = PlaybackState.STOPPED
        self._expected_time = 0.0
        self._timer: Optional[asyncio.TimerHandle] = None
        # Bumped on every cancellation so a step interrupted by a re-entrant
        # call from a hook does not schedule a second timer.
        self._generation = 0

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        listener: Optional[ReaderListener] = None,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> "RSVPEngine":
        """Create an engine configured from application settings."""
        return cls(
            listener,
            loop=loop,
            default_wpm=settings.default_wpm,
            display_default_wpm=settings.display_default_wpm,
            min_wpm=settings.absolute_min_wpm,
            strict=settings.strict_rate_validation,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.PLAYING

    @property
    def index(self) -> int:
        return self._index

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def total_words(self) -> int:
        return len(self._words)

    @property
    def current_word(self) -> Optional[str]:
        if self._index < len(self._words):
            return self._words[self._index]
        return None

    def set_listener(self, listener: Optional[ReaderListener]) -> None:
        self._listener = listener or ReaderListener()

    def get_progress(self, wpm: Optional[float] = None) -> ReadingProgress:
        """Progress at the current position, using the live rate by default."""
        return self._progress_at(self._index, self._resolve_rate(wpm))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self, text: str) -> None:
        """Tokenize text and reset to a stopped engine at the first word."""
        self._cancel_pending()
        self._words = tokenize(text)
        self._index = 0
        self._state = PlaybackState.STOPPED
        logger.debug("Engine initialized with %d words", len(self._words))

    def play(self) -> None:
        """
        Start or resume playback.

        The word at the current position is emitted synchronously; later
        words follow on the event loop. Playing from the terminal position
        starts over from the first word.
        """
        if self._state is PlaybackState.PLAYING:
            return

        if self._index >= len(self._words):
            self._index = 0

        self._active_loop = self._loop or asyncio.get_running_loop()
        self._state = PlaybackState.PLAYING
        self._expected_time = self._now_ms()
        logger.debug("Playback started at word %d", self._index)
        self._step()

    def pause(self) -> None:
        """Pause playback; no effect unless playing."""
        if self._state is not PlaybackState.PLAYING:
            return

        self._cancel_pending()
        self._state = PlaybackState.PAUSED
        logger.debug("Playback paused at word %d", self._index)

    def stop(self) -> None:
        """Stop playback and rewind to the first word."""
        self._cancel_pending()
        self._index = 0
        self._state = PlaybackState.STOPPED

    def restart(self) -> None:
        """Stop, rewind and display the first word."""
        self.stop()
        if self._words:
            self._emit(self._index, self.display_default_wpm)

    def go_to_end(self) -> None:
        """Stop and display the last word."""
        self._cancel_pending()
        self._index = max(0, len(self._words) - 1)
        self._state = PlaybackState.STOPPED
        if self._words:
            self._emit(self._index, self.display_default_wpm)

    def seek_to(self, index: int, wpm: Optional[float] = None) -> None:
        """
        Jump to a word and display it.

        Out-of-range indices are ignored. While playing, playback continues
        from the new position with a fresh scheduling anchor.

        Args:
            index: Target word index, 0 <= index < total_words.
            wpm: Rate for the progress estimate; defaults to the live rate.
        """
        if not 0 <= index < len(self._words):
            logger.debug("Ignoring seek to %d (sequence has %d words)", index, len(self._words))
            return

        if self._state is PlaybackState.PLAYING:
            self._cancel_pending()
            self._index = index
            self._expected_time = self._now_ms()
            self._step()
            return

        # Resolved first so a rejected rate leaves the position unchanged
        rate = self._resolve_rate(wpm)
        self._cancel_pending()
        self._index = index
        self._emit(index, rate)

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _step(self) -> None:
        if self._index >= len(self._words):
            self._state = PlaybackState.STOPPED
            self._timer = None
            logger.debug("Playback complete after %d words", len(self._words))
            self._listener.on_complete()
            return

        try:
            wpm = self._pull_rate()
        except InvalidRateError:
            # Keep the position so playback can resume once the rate is fixed
            self._state = PlaybackState.PAUSED
            logger.error("Playback paused at word %d: invalid rate", self._index)
            raise

        word = self._words[self._index]
        duration = self._timing_calculator.calculate_duration_ms(word, wpm)

        drift = self._now_ms() - self._expected_time
        delay = max(0.0, duration - drift)
        self._expected_time += duration

        generation = self._generation
        self._emit(self._index, wpm)

        # A hook paused, stopped or re-seeked the engine
        if generation != self._generation or self._state is not PlaybackState.PLAYING:
            return

        logger.debug(
            "Word %d scheduled",
            self._index,
            extra={"extra_data": {"delay_ms": delay, "drift_ms": drift, "wpm": wpm}},
        )
        self._timer = self._active_loop.call_later(delay / 1000.0, self._advance)

    def _advance(self) -> None:
        self._timer = None
        if self._state is not PlaybackState.PLAYING:
            return
        self._index += 1
        self._step()

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _emit(self, index: int, wpm: float) -> None:
        generation = self._generation
        parts = self._orp_calculator.split_for_display(self._words[index])
        self._listener.on_word_change(parts)
        if generation != self._generation:
            return
        self._listener.on_progress(self._progress_at(index, wpm))

    def _progress_at(self, index: int, wpm: float) -> ReadingProgress:
        return calculate_progress(
            index,
            len(self._words),
            wpm,
            strict=self.strict,
            default=self.default_wpm,
            minimum=self.min_wpm,
        )

    def _resolve_rate(self, wpm: Optional[float]) -> float:
        if wpm is None:
            return self._pull_rate()
        return normalize_rate(
            wpm,
            strict=self.strict,
            default=self.default_wpm,
            minimum=self.min_wpm,
        )

    def _pull_rate(self) -> float:
        return normalize_rate(
            self._listener.current_rate(),
            strict=self.strict,
            default=self.default_wpm,
            minimum=self.min_wpm,
        )

    def _now_ms(self) -> float:
        return self._active_loop.time() * 1000.0
