"""Enums for reader state and display options."""

from enum import Enum


class PlaybackState(str, Enum):
    """Playback mode of an RSVP engine. Exactly one holds at any instant."""

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class FontSize(str, Enum):
    """Enum for word display font sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Theme(str, Enum):
    """Enum for color theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
