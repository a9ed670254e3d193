from __future__ import annotations

import logging
from enum import Enum
from typing import List, Sequence

from .editor import (
    ActiveEditorChanged,
    DocumentChanged,
    EditorEvent,
    EditorWindow,
    Selection,
    SelectionChanged,
)

logger = logging.getLogger(__name__)


class Decision(Enum):
    """What the session should do in response to an editor event."""

    RECOMPUTE = "recompute"
    CLEAR = "clear"
    IGNORE = "ignore"


class ChangeTracker:
    """
    Decides whether an editor event warrants a recompute.

    The tracker remembers the last accepted set of non-empty selections.
    ``dedup`` controls how a new set is compared with it:

    ``identity``
        Only the very same list object counts as unchanged. Each event carries
        a freshly built list, so in practice any non-empty selection triggers
        a recompute.
    ``structural``
        Lists holding equal ranges in the same order count as unchanged.
    ``always``
        No comparison; every selection event triggers a recompute.
    """

    def __init__(self, window: EditorWindow, dedup: str = "identity") -> None:
        self._window = window
        self._dedup = dedup
        self.selection: List[Selection] | None = None

    @property
    def state(self) -> str:
        return "idle" if self.selection is None else "has-selection"

    def handle(self, event: EditorEvent) -> Decision:
        if isinstance(event, DocumentChanged):
            return self._on_document_changed(event)
        if isinstance(event, ActiveEditorChanged):
            return self._on_active_editor_changed(event)
        if isinstance(event, SelectionChanged):
            return self._on_selection_changed(event)
        raise TypeError(f"Unsupported editor event: {event!r}")

    def _on_document_changed(self, event: DocumentChanged) -> Decision:
        editor = self._window.active_editor
        if editor is None or event.document is not editor.document:
            logger.debug("Ignoring change to inactive document %s", event.document.uri)
            return Decision.IGNORE
        self.selection = None
        return Decision.RECOMPUTE

    def _on_active_editor_changed(self, event: ActiveEditorChanged) -> Decision:
        if event.editor is not self._window.active_editor:
            logger.debug("Ignoring stale active-editor notification")
            return Decision.IGNORE
        self.selection = None
        if event.editor is None:
            return Decision.CLEAR
        return Decision.RECOMPUTE

    def _on_selection_changed(self, event: SelectionChanged) -> Decision:
        if event.editor is not self._window.active_editor:
            logger.debug("Ignoring selection change in inactive editor")
            return Decision.IGNORE
        selected = [s for s in event.selections if not s.is_empty] or None
        if self._unchanged(selected):
            return Decision.IGNORE
        self.selection = selected
        return Decision.RECOMPUTE

    def _unchanged(self, selected: Sequence[Selection] | None) -> bool:
        if self._dedup == "always":
            return False
        if self._dedup == "structural":
            if selected is None or self.selection is None:
                return selected is None and self.selection is None
            return tuple(selected) == tuple(self.selection)
        return selected is self.selection
