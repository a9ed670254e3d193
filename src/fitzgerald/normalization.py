from __future__ import annotations

from typing import Callable, Collection

from lemminflect import getAllLemmas, getLemma

# Words shorter than this are left alone by the tense heuristic.
MIN_INFLECTED_LENGTH = 6


def singularize(word: str) -> str:
    """
    Reduce a plural noun or third-person verb to its base form.

    Known words go through the dictionary, nouns first. Unknown words ending
    in "s" are stripped by rule as regular plurals.
    """
    known = getAllLemmas(word)
    if not known:
        if not word.endswith("s"):
            return word
        lemmas = getLemma(word, upos="NOUN", lemmatize_oov=True)
        return lemmas[0] if lemmas else word
    nouns = known.get("NOUN")
    if nouns and nouns[0] != word:
        return nouns[0]
    if word.endswith("s"):
        verbs = known.get("VERB")
        if verbs:
            return verbs[0]
    return word


class WordNormalizer:
    """
    Maps a token onto the form most likely to appear in the easy-word list.

    This is a heuristic rather than a lemmatizer: it may produce non-words
    (``"jumping"`` becomes ``"jump"`` but ``"singing"`` becomes ``"sing"`` and
    ``"ceiling"`` becomes ``"ceil"``).
    """

    def __init__(
        self,
        easy_words: Collection[str],
        singularizer: Callable[[str], str] | None = None,
    ) -> None:
        self._easy_words = easy_words
        self._singularize = singularizer or singularize

    def normalize(self, token: str) -> str:
        return self.present_tense(self._singularize(token.lower()))

    def present_tense(self, word: str) -> str:
        if len(word) < MIN_INFLECTED_LENGTH:
            return word
        if word.endswith("ed"):
            silent_e = word[:-1]  # e.g. surfaced -> surface
            if silent_e in self._easy_words:
                return silent_e
            return word[:-2]
        if word.endswith("ing"):
            with_e = word[:-3] + "e"  # e.g. forcing -> force
            if with_e in self._easy_words:
                return with_e
            return word[:-3]
        return word
