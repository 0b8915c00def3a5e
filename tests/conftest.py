# tests/conftest.py
"""Shared pytest fixtures and test helpers."""

from typing import Callable, List, Optional, Tuple

import pytest

from speedreader.config import Settings
from speedreader.services.engine import ReaderListener, ReadingProgress, RSVPEngine, WordParts


class FakeTimerHandle:
    """Stand-in for asyncio.TimerHandle."""

    def __init__(self, when: float, delay: float, callback: Callable, args: tuple):
        self.when = when
        self.delay = delay
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Deterministic event loop exposing only time() and call_later().

    Time only moves when a test advances it, so scheduler behaviour can be
    asserted to the millisecond.
    """

    def __init__(self):
        self.now = 0.0
        self.handles: List[FakeTimerHandle] = []

    def time(self) -> float:
        return self.now

    def call_later(self, delay: float, callback: Callable, *args) -> FakeTimerHandle:
        handle = FakeTimerHandle(self.now + delay, delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire_next(self, latency: float = 0.0) -> FakeTimerHandle:
        """Run the earliest pending callback, optionally late by `latency` seconds."""
        handle = min(self.pending, key=lambda h: h.when)
        self.handles.remove(handle)
        self.now = handle.when + latency
        handle.callback(*handle.args)
        return handle

    def advance(self, seconds: float) -> None:
        """Move time forward, running every callback that falls due."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target + 1e-9]
            if not due:
                break
            self.fire_next()
        self.now = max(self.now, target)

    def run_until_idle(self, max_steps: int = 100_000) -> None:
        steps = 0
        while self.pending:
            self.fire_next()
            steps += 1
            assert steps < max_steps, "scheduler never went idle"


class RecordingListener(ReaderListener):
    """Listener that records every emission with the loop time (ms)."""

    def __init__(self, loop: Optional[FakeLoop] = None, wpm: Optional[float] = 300):
        self.loop = loop
        self.wpm = wpm
        self.words: List[Tuple[float, WordParts]] = []
        self.progress: List[ReadingProgress] = []
        self.completed: List[float] = []
        self.rate_requests = 0

    def _now(self) -> float:
        return self.loop.time() * 1000.0 if self.loop else 0.0

    def on_word_change(self, parts: WordParts) -> None:
        self.words.append((self._now(), parts))

    def on_progress(self, progress: ReadingProgress) -> None:
        self.progress.append(progress)

    def on_complete(self) -> None:
        self.completed.append(self._now())

    def current_rate(self) -> Optional[float]:
        self.rate_requests += 1
        return self.wpm

    @property
    def texts(self) -> List[str]:
        return [parts.text for _, parts in self.words]

    @property
    def times(self) -> List[float]:
        return [when for when, _ in self.words]


@pytest.fixture
def fake_loop():
    """Deterministic loop driving engine timers."""
    return FakeLoop()


@pytest.fixture
def listener(fake_loop):
    """Recording listener reporting 300 WPM."""
    return RecordingListener(fake_loop)


@pytest.fixture
def engine(listener, fake_loop):
    """Engine wired to the recording listener and fake loop."""
    return RSVPEngine(listener, loop=fake_loop)


@pytest.fixture
def app_settings(tmp_path):
    """Application settings isolated from the user's environment."""
    return Settings(settings_path=tmp_path / "settings.json", _env_file=None)


@pytest.fixture
def make_listener(fake_loop):
    """Factory for recording listeners with a chosen rate."""

    def _make_listener(wpm: Optional[float] = 300) -> RecordingListener:
        return RecordingListener(fake_loop, wpm=wpm)

    return _make_listener
