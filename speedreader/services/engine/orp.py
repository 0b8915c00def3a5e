"""ORP (Optimal Recognition Point) calculator for RSVP reading."""

from .text_utils import clean_word, get_clean_word_length
from .types import WordParts


class ORPCalculator:
    """
    Calculate the Optimal Recognition Point for words.

    The ORP is the character position in a word where the eye should anchor
    for fastest recognition. Short words anchor on their first or second
    character; longer words anchor on the middle, biased toward the earlier
    character for even lengths.

    Offsets always index into the cleaned word (letters and digits only),
    so punctuation never shifts the highlight.
    """

    def calculate(self, word: str) -> int:
        """
        Calculate the ORP index for a word.

        Args:
            word: The word to calculate ORP for (punctuation is ignored).

        Returns:
            The 0-indexed position of the ORP character in the cleaned word.

        Examples:
            >>> calc = ORPCalculator()
            >>> calc.calculate("the")
            1
            >>> calc.calculate("reading")
            3
        """
        length = get_clean_word_length(word)

        if length <= 1:
            return 0
        if length <= 3:
            return 1

        return (length - 1) // 2

    def split_for_display(self, word: str) -> WordParts:
        """
        Split a word into three parts for ORP display.

        Leading and trailing punctuation is dropped from the displayed form.

        Args:
            word: The word to split.

        Returns:
            WordParts(before, highlight, after).

        Example:
            >>> ORPCalculator().split_for_display('"reading,"')
            WordParts(before='rea', highlight='d', after='ing')
        """
        clean = clean_word(word)
        orp_index = self.calculate(word)

        return WordParts(
            before=clean[:orp_index],
            highlight=clean[orp_index] if orp_index < len(clean) else "",
            after=clean[orp_index + 1:],
        )
