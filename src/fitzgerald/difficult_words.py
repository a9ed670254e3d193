from __future__ import annotations

from typing import Callable, Collection, Set

from .models import DifficultWordMap
from .normalization import WordNormalizer
from .tokenization import iter_tokens

DISPLAY_SYLLABLE_THRESHOLD = 3
CANDIDATE_SYLLABLE_THRESHOLD = 2


class DifficultWordIndex:
    """
    Finds the difficult words in a text.

    A token is difficult when its normalized form is not an easy word and the
    token as written has at least ``threshold`` syllables.
    """

    def __init__(
        self,
        easy_words: Collection[str],
        syllable_counter: Callable[[str], int],
        normalizer: WordNormalizer | None = None,
    ) -> None:
        self._easy_words = easy_words
        self._syllable_counter = syllable_counter
        self._normalizer = normalizer or WordNormalizer(easy_words)

    def is_difficult(
        self, word: str, threshold: int = DISPLAY_SYLLABLE_THRESHOLD
    ) -> bool:
        if self._normalizer.normalize(word) in self._easy_words:
            return False
        return self._syllable_counter(word) >= threshold

    def build(
        self, text: str, threshold: int = DISPLAY_SYLLABLE_THRESHOLD
    ) -> DifficultWordMap:
        """Map each difficult surface form to its spans, in scan order."""
        word_map: DifficultWordMap = {}
        for token in iter_tokens(text):
            if self.is_difficult(token.text, threshold):
                word_map.setdefault(token.text, []).append(token.span)
        return word_map

    def candidates(
        self, text: str, threshold: int = CANDIDATE_SYLLABLE_THRESHOLD
    ) -> Set[str]:
        """Return the set of difficult surface forms without their spans."""
        return {
            token.text
            for token in iter_tokens(text)
            if self.is_difficult(token.text, threshold)
        }
