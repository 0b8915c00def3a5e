"""Exception hierarchy for the speed reader."""


class SpeedReaderError(Exception):
    """Base exception for speed reader errors"""

    pass


class InvalidRateError(SpeedReaderError, ValueError):
    """Raised when a reading rate is rejected under strict validation"""

    def __init__(self, wpm: float):
        self.wpm = wpm
        super().__init__(f"WPM must be positive and finite, got {wpm!r}")


class SettingsError(SpeedReaderError):
    """Raised when reader settings cannot be parsed"""

    pass
