from __future__ import annotations

import logging

import textstat

from ..models import ReadabilityStats
from .base import ReadabilityMetrics

logger = logging.getLogger(__name__)

EMPTY_STATS = ReadabilityStats(
    syllables=0,
    words=0,
    sentences=0,
    grade=0.0,
    flesch=0.0,
    flesch_kincaid=0.0,
    gunning_fog=0.0,
    smog=0.0,
    automated_readability=0.0,
    coleman_liau=0.0,
    linsear_write=0.0,
    dale_chall=0.0,
    friendly_grade=None,
)


class TextstatMetrics(ReadabilityMetrics):
    """Readability metrics computed with the textstat package."""

    def __init__(self, language: str = "en_US") -> None:
        self.language = language
        textstat.set_lang(language)

    def measure(self, text: str) -> ReadabilityStats:
        if not text.strip():
            logger.debug("Empty text; returning zeroed readability stats")
            return EMPTY_STATS
        return ReadabilityStats(
            syllables=int(textstat.syllable_count(text)),
            words=int(textstat.lexicon_count(text, removepunct=True)),
            sentences=int(textstat.sentence_count(text)),
            grade=textstat.text_standard(text, float_output=True),
            friendly_grade=str(textstat.text_standard(text, float_output=False)),
            flesch=float(textstat.flesch_reading_ease(text)),
            flesch_kincaid=float(textstat.flesch_kincaid_grade(text)),
            gunning_fog=float(textstat.gunning_fog(text)),
            smog=float(textstat.smog_index(text)),
            automated_readability=float(textstat.automated_readability_index(text)),
            coleman_liau=float(textstat.coleman_liau_index(text)),
            linsear_write=float(textstat.linsear_write_formula(text)),
            dale_chall=float(textstat.dale_chall_readability_score(text)),
        )

    def syllable_count(self, word: str) -> int:
        return int(textstat.syllable_count(word))
