from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .analysis import AnalysisCoordinator
from .config import FitzgeraldConfig
from .difficult_words import DifficultWordIndex
from .display import DisplaySync, PanelHost
from .easy_words import load_easy_words
from .editor import EditorEvent, EditorWindow
from .metrics import ReadabilityMetrics, build_metrics_from_config
from .models import AnalysisResult
from .panel import LocalPanelHost
from .tracking import ChangeTracker, Decision

logger = logging.getLogger(__name__)


class Session:
    """
    Everything one editing session needs: the change tracker, the analysis
    coordinator and the display. Events are handled one at a time, each
    producing at most one recompute.
    """

    def __init__(
        self,
        window: EditorWindow,
        config: FitzgeraldConfig | None = None,
        *,
        metrics: ReadabilityMetrics | None = None,
        panel_host: PanelHost | None = None,
        resource_root: str | Path | None = None,
    ) -> None:
        self.window = window
        self.config = config or FitzgeraldConfig()
        self.resource_root = resource_root
        self.metrics = metrics or build_metrics_from_config(self.config)
        self.index = DifficultWordIndex(
            load_easy_words(self.config.easy_words_path),
            self.metrics.syllable_count,
        )
        self.coordinator = AnalysisCoordinator(
            window,
            self.index,
            self.metrics,
            threshold=self.config.display_threshold,
            per_selection_anchors=self.config.per_selection_anchors,
            hover_message=self.config.panel.hover_message,
        )
        self.tracker = ChangeTracker(window, dedup=self.config.selection_dedup)
        self.display = DisplaySync(panel_host or LocalPanelHost(), self.config.panel)
        self.last_result: AnalysisResult | None = None
        self._unsubscribe: Callable[[], None] | None = None

    def activate(self) -> None:
        """Start receiving editor notifications."""
        if self._unsubscribe is None:
            self._unsubscribe = self.window.subscribe(self.dispatch)

    def deactivate(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def show_stats(self) -> AnalysisResult | None:
        """Recompute and show the stats panel, creating it if needed."""
        result = self._recompute()
        self.display.show(result, self.resource_root)
        return result

    def dispatch(self, event: EditorEvent) -> AnalysisResult | None:
        """Handle one editor event; returns the new result if one was computed."""
        decision = self.tracker.handle(event)
        if decision is Decision.RECOMPUTE:
            result = self._recompute()
            self.display.show(result)
            return result
        if decision is Decision.CLEAR and self.config.clear_on_no_editor:
            self.display.clear()
        return None

    def candidates(self, text: str) -> set[str]:
        """Plain set of difficult words in text at the candidate threshold."""
        return self.index.candidates(text, self.config.candidate_threshold)

    def _recompute(self) -> AnalysisResult | None:
        result = self.coordinator.recompute()
        self.last_result = result
        return result
