"""Reading controller wiring settings, storage and a view to the RSVP engine."""

import asyncio
import logging
from typing import Optional

from speedreader.config import Settings, get_settings
from speedreader.models.enums import FontSize, Theme
from speedreader.models.settings import MAX_WPM, MIN_WPM, ReaderSettings
from speedreader.services.engine import (
    ReaderListener,
    ReadingProgress,
    RSVPEngine,
    WordParts,
    count_words,
)
from speedreader.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class ReaderView:
    """Rendering collaborator. Subclasses override what they can display."""

    def show_word(self, parts: WordParts) -> None:
        pass

    def show_progress(self, progress: ReadingProgress) -> None:
        pass

    def set_playing(self, is_playing: bool) -> None:
        pass

    def show_complete(self) -> None:
        pass

    def apply_settings(self, settings: ReaderSettings) -> None:
        pass

    def apply_theme(self, theme: Theme) -> None:
        pass


def word_count_label(text: str) -> str:
    """Return the entry-screen word count, e.g. "1 word" or "12 words"."""
    count = count_words(text)
    return f"{count} word{'' if count == 1 else 's'}"


class ReadingController(ReaderListener):
    """
    Application controller for a reading session.

    Acts as the engine's listener: the live rate comes from the reader
    settings, and every emission is forwarded to the view. User actions
    (buttons, keys, setting changes) arrive here and are persisted through
    the settings store.
    """

    KEY_BINDINGS = {
        " ": "toggle_play_pause",
        "Home": "restart",
        "r": "restart",
        "R": "restart",
        "End": "go_to_end",
        "e": "go_to_end",
        "E": "go_to_end",
        "Escape": "back",
    }

    def __init__(
        self,
        store: SettingsStore,
        *,
        view: Optional[ReaderView] = None,
        app_settings: Optional[Settings] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        self.app_settings = app_settings or get_settings()
        self.store = store
        self.view = view or ReaderView()

        self.settings = store.get_settings()
        self.theme = store.get_theme()
        self.engine = RSVPEngine.from_settings(self.app_settings, self, loop=loop)

        self.view.apply_settings(self.settings)
        self.view.apply_theme(self.theme)

    # ------------------------------------------------------------------
    # Engine listener
    # ------------------------------------------------------------------

    def current_rate(self) -> float:
        return self.settings.wpm

    def on_word_change(self, parts: WordParts) -> None:
        self.view.show_word(parts)

    def on_progress(self, progress: ReadingProgress) -> None:
        self.view.show_progress(progress)

    def on_complete(self) -> None:
        logger.info("Finished reading %d words", self.engine.total_words)
        self.view.set_playing(False)
        self.view.show_complete()

    # ------------------------------------------------------------------
    # Reading actions
    # ------------------------------------------------------------------

    def start_reading(self, text: str) -> bool:
        """
        Load text and display its first word.

        Returns:
            False when the text is blank and nothing was loaded.
        """
        if not text or not text.strip():
            return False

        self.engine.init(text)
        self.view.set_playing(False)
        self.engine.seek_to(0, self.settings.wpm)
        return True

    def toggle_play_pause(self) -> None:
        if self.engine.is_playing:
            self.engine.pause()
        else:
            self.engine.play()
        self.view.set_playing(self.engine.is_playing)

    def restart(self) -> None:
        self.engine.restart()
        self.view.set_playing(False)
        # Redisplay with the live rate; restart() estimates time at the default
        self.engine.seek_to(0, self.settings.wpm)

    def go_to_end(self) -> None:
        self.engine.go_to_end()
        self.view.set_playing(False)

    def back(self) -> None:
        self.engine.stop()
        self.view.set_playing(False)

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a keyboard shortcut.

        Returns:
            True if the key is bound to an action.
        """
        action = self.KEY_BINDINGS.get(key)
        if action is None:
            return False
        getattr(self, action)()
        return True

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def update_wpm(self, value: float, *, persist: bool = True) -> int:
        """Set the reading rate, clamped to the configured range."""
        requested = int(value)
        lowest = max(self.app_settings.min_wpm, MIN_WPM)
        highest = min(self.app_settings.max_wpm, MAX_WPM)
        wpm = min(max(requested, lowest), highest)
        if wpm != requested:
            logger.debug("WPM %d clamped to %d", requested, wpm)

        self.settings.wpm = wpm
        if persist:
            self.store.update_setting("wpm", wpm)
        return wpm

    def set_font_size(self, size: str) -> None:
        self.settings.font_size = FontSize(size)
        self.store.update_setting("font_size", self.settings.font_size.value)
        self.view.apply_settings(self.settings)

    def toggle_highlight(self) -> None:
        self.settings.highlight_focus = not self.settings.highlight_focus
        self.store.update_setting("highlight_focus", self.settings.highlight_focus)
        self.view.apply_settings(self.settings)

    def toggle_fixation(self) -> None:
        self.settings.fixation_point = not self.settings.fixation_point
        self.store.update_setting("fixation_point", self.settings.fixation_point)
        self.view.apply_settings(self.settings)

    def toggle_theme(self) -> Theme:
        self.theme = Theme.LIGHT if self.theme is Theme.DARK else Theme.DARK
        self.store.save_theme(self.theme)
        self.view.apply_theme(self.theme)
        return self.theme
