"""Value types emitted by the RSVP engine to its collaborators."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class WordParts:
    """A token split around its highlight character for display.

    Attributes:
        before: Characters left of the highlight.
        highlight: The Optimal Recognition Point character ("" for empty words).
        after: Characters right of the highlight.
    """

    before: str
    highlight: str
    after: str

    @property
    def text(self) -> str:
        return f"{self.before}{self.highlight}{self.after}"


@dataclass(frozen=True)
class ReadingProgress:
    """Progress snapshot paired with every word emission.

    Attributes:
        percentage: Share of the sequence already passed, 0-100.
        current_word: 1-based ordinal of the displayed word.
        total_words: Length of the token sequence.
        remaining_time: Estimated time left, formatted "m:ss".
    """

    percentage: int
    current_word: int
    total_words: int
    remaining_time: str

    def to_dict(self) -> dict:
        return asdict(self)
