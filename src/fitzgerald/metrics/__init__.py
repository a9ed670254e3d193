from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ReadabilityMetrics
from .textstat_metrics import TextstatMetrics

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import FitzgeraldConfig

__all__ = [
    "ReadabilityMetrics",
    "TextstatMetrics",
    "build_metrics_from_config",
]


def build_metrics_from_config(config: "FitzgeraldConfig") -> ReadabilityMetrics:
    """Convenience helper to build the metrics backend from FitzgeraldConfig."""
    return TextstatMetrics(language=config.language)
