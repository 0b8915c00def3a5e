"""Business logic services for the speed reader."""

from speedreader.services.controller import ReaderView, ReadingController, word_count_label
from speedreader.services.engine import RSVPEngine, tokenize
from speedreader.services.settings_store import SettingsStore

__all__ = [
    "RSVPEngine",
    "ReaderView",
    "ReadingController",
    "SettingsStore",
    "tokenize",
    "word_count_label",
]
