from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import ReadabilityStats


class ReadabilityMetrics(ABC):
    """Abstract source of readability scores and per-word syllable counts."""

    @abstractmethod
    def measure(self, text: str) -> ReadabilityStats:
        """Return the scalar readability metrics for the input text."""
        raise NotImplementedError

    @abstractmethod
    def syllable_count(self, word: str) -> int:
        """Return the number of syllables in a single token."""
        raise NotImplementedError
