"""
In-process editor surface: documents, editors, selections and decorations.

The window delivers change notifications synchronously to its subscribers,
one event at a time, in the order the changes are made.
"""

from __future__ import annotations

import bisect
import itertools
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Union

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_untitled_ids = itertools.count(1)


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based line/character location in a document."""

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    """A pair of positions; start is always before or equal to end."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class Selection(Range):
    """A user selection. An empty selection is just the insertion point."""

    @classmethod
    def caret(cls, position: Position) -> "Selection":
        return cls(position, position)


@dataclass(frozen=True, slots=True)
class DecorationType:
    key: str
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Decoration:
    range: Range
    hover_message: str | None = None


class TextDocument:
    """Mutable text buffer with offset/position conversion."""

    def __init__(self, text: str = "", uri: str | None = None) -> None:
        self.uri = uri or f"untitled:Untitled-{next(_untitled_ids)}"
        self.version = 0
        self._text = ""
        self._line_starts: List[int] = [0]
        self._line_ends: List[int] = [0]
        self._set_text(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def replace_text(self, text: str) -> None:
        """Replace the whole buffer and bump the version."""
        self._set_text(text)

    def get_text(self, text_range: Range | None = None) -> str:
        if text_range is None:
            return self._text
        start = self.offset_at(text_range.start)
        end = self.offset_at(text_range.end)
        return self._text[start:end]

    def position_at(self, offset: int) -> Position:
        """Convert a character offset to a position, clamping to the document."""
        offset = min(max(offset, 0), len(self._text))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line]
        # Offsets inside a line break resolve to the end of that line.
        character = min(offset, self._line_ends[line]) - line_start
        return Position(line, character)

    def offset_at(self, position: Position) -> int:
        """Convert a position to a character offset, clamping to the document."""
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self._text)
        line_start = self._line_starts[position.line]
        line_end = self._line_ends[position.line]
        character = min(max(position.character, 0), line_end - line_start)
        return line_start + character

    def translate(self, position: Position, character_delta: int) -> Position:
        """Move a position by a number of characters, crossing line breaks."""
        return self.position_at(self.offset_at(position) + character_delta)

    def _set_text(self, text: str) -> None:
        self._text = text
        self.version += 1
        starts = [0]
        ends: List[int] = []
        for match in LINE_BREAK_RE.finditer(text):
            ends.append(match.start())
            starts.append(match.end())
        ends.append(len(text))
        self._line_starts = starts
        self._line_ends = ends

    def __repr__(self) -> str:
        return f"TextDocument(uri={self.uri!r}, version={self.version})"


class TextEditor:
    """A view onto a document holding selections and decorations."""

    def __init__(
        self, document: TextDocument, selections: Sequence[Selection] | None = None
    ) -> None:
        self.document = document
        self.selections: List[Selection] = list(
            selections or [Selection.caret(Position(0, 0))]
        )
        self._decorations: Dict[str, List[Decoration]] = {}

    def set_decorations(
        self, decoration_type: DecorationType, decorations: Iterable[Decoration]
    ) -> None:
        """Replace every decoration of the given type."""
        self._decorations[decoration_type.key] = list(decorations)

    def decorations(self, decoration_type: DecorationType) -> List[Decoration]:
        return list(self._decorations.get(decoration_type.key, []))


@dataclass(frozen=True, slots=True)
class DocumentChanged:
    document: TextDocument


@dataclass(frozen=True, slots=True)
class ActiveEditorChanged:
    editor: TextEditor | None


@dataclass(frozen=True, slots=True)
class SelectionChanged:
    editor: TextEditor
    selections: Sequence[Selection]


EditorEvent = Union[DocumentChanged, ActiveEditorChanged, SelectionChanged]
EventListener = Callable[[EditorEvent], object]


class EditorWindow:
    """Tracks the active editor and notifies subscribers of changes."""

    def __init__(self) -> None:
        self.active_editor: TextEditor | None = None
        self._listeners: List[EventListener] = []

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def open(self, text: str, uri: str | None = None) -> TextEditor:
        """Open a new document in a new editor and make it active."""
        editor = TextEditor(TextDocument(text, uri=uri))
        self.show(editor)
        return editor

    def show(self, editor: TextEditor | None) -> None:
        """Make the given editor active; None means no editor has focus."""
        self.active_editor = editor
        self._emit(ActiveEditorChanged(editor))

    def edit(self, document: TextDocument, text: str) -> None:
        document.replace_text(text)
        self._emit(DocumentChanged(document))

    def select(self, editor: TextEditor, selections: Iterable[Selection]) -> None:
        editor.selections = list(selections)
        self._emit(SelectionChanged(editor, list(editor.selections)))

    def _emit(self, event: EditorEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
