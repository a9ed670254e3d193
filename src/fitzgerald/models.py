from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .editor import Position

Span = Tuple[int, int]
DifficultWordMap = Dict[str, List[Span]]


@dataclass(slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int

    @property
    def span(self) -> Span:
        return (self.start_char, self.end_char)


@dataclass(frozen=True, slots=True)
class ReadabilityStats:
    """Scalar readability metrics for one analyzed text."""

    syllables: int
    words: int
    sentences: int
    grade: float | str
    flesch: float
    flesch_kincaid: float
    gunning_fog: float
    smog: float
    automated_readability: float
    coleman_liau: float
    linsear_write: float
    dale_chall: float
    friendly_grade: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the metrics keyed the way the display panel expects them."""
        payload: dict[str, Any] = {
            "syllables": self.syllables,
            "words": self.words,
            "sentences": self.sentences,
            "grade": self.grade,
            "flesch": self.flesch,
            "fleschKincaid": self.flesch_kincaid,
            "gunningFog": self.gunning_fog,
            "smog": self.smog,
            "automatedReadability": self.automated_readability,
            "colemanLiau": self.coleman_liau,
            "linsearWrite": self.linsear_write,
            "daleChall": self.dale_chall,
        }
        if self.friendly_grade is not None:
            payload["friendlyGrade"] = self.friendly_grade
        return payload


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Snapshot produced by one recompute. Superseded, never mutated."""

    stats: ReadabilityStats
    difficult_words: Tuple[str, ...]
    word_map: Mapping[str, Tuple[Span, ...]]
    anchor: Position
    analyzed_text: str = field(default="", repr=False)

    @classmethod
    def create(
        cls,
        stats: ReadabilityStats,
        word_map: DifficultWordMap,
        anchor: Position,
        analyzed_text: str = "",
    ) -> "AnalysisResult":
        """Freeze a freshly built word map into a result snapshot."""
        frozen = {word: tuple(spans) for word, spans in word_map.items()}
        words = sorted(frozen)
        words.reverse()
        return cls(
            stats=stats,
            difficult_words=tuple(words),
            word_map=MappingProxyType(frozen),
            anchor=anchor,
            analyzed_text=analyzed_text,
        )

    def to_stats_payload(self) -> dict[str, Any]:
        payload = self.stats.to_payload()
        payload["difficultWords"] = list(self.difficult_words)
        return payload
