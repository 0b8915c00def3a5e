"""Data models for the speed reader."""

from speedreader.models.enums import FontSize, PlaybackState, Theme
from speedreader.models.settings import ReaderSettings

__all__ = [
    "FontSize",
    "PlaybackState",
    "ReaderSettings",
    "Theme",
]
