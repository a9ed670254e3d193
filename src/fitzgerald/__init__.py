"""
fitzgerald package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import FitzgeraldConfig, config_from_dict, config_from_yaml, load_config
from .difficult_words import DifficultWordIndex
from .editor import EditorWindow
from .models import AnalysisResult
from .normalization import WordNormalizer
from .session import Session

__all__ = [
    "FitzgeraldConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "DifficultWordIndex",
    "EditorWindow",
    "AnalysisResult",
    "WordNormalizer",
    "Session",
]

__version__ = "0.1.0"
