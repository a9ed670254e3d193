from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .difficult_words import DISPLAY_SYLLABLE_THRESHOLD, DifficultWordIndex
from .editor import EditorWindow, Position, Selection, TextDocument, TextEditor
from .errors import NoActiveDocument
from .metrics import ReadabilityMetrics
from .models import AnalysisResult
from .offsets import (
    AnchorSegment,
    apply_decorations,
    resolve_ranges,
    resolve_segmented_ranges,
)

logger = logging.getLogger(__name__)

SELECTION_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class AnalysisTarget:
    """The text submitted for one recompute and how it maps back to the document."""

    text: str
    anchor: Position
    segments: Tuple[AnchorSegment, ...] = ()

    @property
    def from_selection(self) -> bool:
        return bool(self.segments)


def select_analysis_target(
    document: TextDocument, selections: Sequence[Selection]
) -> AnalysisTarget:
    """Join the non-empty selections, or fall back to the whole document."""
    # The insertion point shows up as an empty selection; it selects nothing.
    selected = [selection for selection in selections if not selection.is_empty]
    if not selected:
        return AnalysisTarget(text=document.get_text(), anchor=Position(0, 0))

    parts: List[str] = []
    segments: List[AnchorSegment] = []
    offset = 0
    for selection in selected:
        if parts:
            offset += len(SELECTION_SEPARATOR)
        segments.append(AnchorSegment(text_offset=offset, anchor=selection.start))
        part = document.get_text(selection)
        parts.append(part)
        offset += len(part)
    return AnalysisTarget(
        text=SELECTION_SEPARATOR.join(parts),
        anchor=selected[0].start,
        segments=tuple(segments),
    )


class AnalysisCoordinator:
    """Recomputes difficult words, metrics and decorations for the active editor."""

    def __init__(
        self,
        window: EditorWindow,
        index: DifficultWordIndex,
        metrics: ReadabilityMetrics,
        *,
        threshold: int = DISPLAY_SYLLABLE_THRESHOLD,
        per_selection_anchors: bool = False,
        hover_message: str | None = None,
    ) -> None:
        self._window = window
        self._index = index
        self._metrics = metrics
        self._threshold = threshold
        self._per_selection_anchors = per_selection_anchors
        self._hover_message = hover_message

    def recompute(self) -> AnalysisResult | None:
        """Analyze the active editor; None when there is nothing to analyze."""
        try:
            editor = self._active_editor()
        except NoActiveDocument as exc:
            logger.debug("Skipping recompute: %s", exc)
            return None

        document = editor.document
        target = select_analysis_target(document, editor.selections)
        word_map = self._index.build(target.text, self._threshold)
        stats = self._metrics.measure(target.text)

        if not target.from_selection:
            ranges = resolve_ranges(word_map, document)
        elif self._per_selection_anchors:
            ranges = resolve_segmented_ranges(word_map, document, target.segments)
        else:
            ranges = resolve_ranges(word_map, document, target.anchor)
        apply_decorations(editor, ranges, self._hover_message)

        logger.debug(
            "Recomputed %s: %d chars, %d difficult words, %d decorations",
            document.uri,
            len(target.text),
            len(word_map),
            len(ranges),
        )
        return AnalysisResult.create(stats, word_map, target.anchor, target.text)

    def _active_editor(self) -> TextEditor:
        editor = self._window.active_editor
        if editor is None or editor.document is None:
            raise NoActiveDocument()
        return editor
