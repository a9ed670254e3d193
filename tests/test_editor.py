from fitzgerald.editor import (
    ActiveEditorChanged,
    DocumentChanged,
    EditorWindow,
    Position,
    Range,
    Selection,
    SelectionChanged,
    TextDocument,
)
from fitzgerald.offsets import DIFFICULT_WORD_DECORATION, apply_decorations


def test_position_offset_round_trip_across_lines():
    """Offsets and positions convert both ways across mixed line breaks."""
    doc = TextDocument("first\nsecond\r\nthird")

    assert doc.line_count == 3
    assert doc.position_at(0) == Position(0, 0)
    assert doc.position_at(6) == Position(1, 0)
    assert doc.position_at(14) == Position(2, 0)
    assert doc.offset_at(Position(2, 3)) == 17
    assert doc.get_text(Range(Position(1, 0), Position(1, 6))) == "second"


def test_position_at_clamps_out_of_range_offsets():
    """Out-of-range offsets and positions clamp to the document."""
    doc = TextDocument("ab\r\ncd")

    assert doc.position_at(-5) == Position(0, 0)
    assert doc.position_at(99) == Position(1, 2)
    # Between \r and \n resolves to the end of the first line.
    assert doc.position_at(3) == Position(0, 2)
    assert doc.offset_at(Position(0, 50)) == 2
    assert doc.offset_at(Position(7, 0)) == len(doc.text)


def test_translate_crosses_line_breaks():
    """Translating a position can move onto later lines."""
    doc = TextDocument("ab\ncdef\ngh")

    assert doc.translate(Position(0, 1), 3) == Position(1, 1)
    assert doc.translate(Position(1, 2), 4) == Position(2, 1)
    assert doc.translate(Position(2, 0), 100) == Position(2, 2)


def test_range_orders_its_positions():
    """Ranges normalize reversed endpoints; carets are empty."""
    text_range = Range(Position(3, 1), Position(1, 4))

    assert text_range.start == Position(1, 4)
    assert text_range.end == Position(3, 1)
    assert Selection.caret(Position(2, 2)).is_empty


def test_set_decorations_replaces_previous_set():
    """Setting decorations replaces the earlier set for that type."""
    window = EditorWindow()
    editor = window.open("hello world")
    first = [Range(Position(0, 0), Position(0, 5))]
    second = [Range(Position(0, 6), Position(0, 11))]

    apply_decorations(editor, first, "Difficult word!")
    apply_decorations(editor, second, "Difficult word!")

    decorations = editor.decorations(DIFFICULT_WORD_DECORATION)
    assert [d.range for d in decorations] == second
    assert decorations[0].hover_message == "Difficult word!"


def test_window_emits_events_in_order():
    """The window notifies subscribers in order until disposed."""
    window = EditorWindow()
    received = []
    dispose = window.subscribe(received.append)

    editor = window.open("some text")
    window.select(editor, [Selection(Position(0, 0), Position(0, 4))])
    window.edit(editor.document, "other text")
    window.show(None)
    dispose()
    window.show(editor)

    assert [type(event) for event in received] == [
        ActiveEditorChanged,
        SelectionChanged,
        DocumentChanged,
        ActiveEditorChanged,
    ]
    assert received[-1].editor is None
    assert editor.document.text == "other text"
    assert editor.document.version == 2


def test_new_editor_starts_with_caret_selection():
    """A new editor has a single caret at the document start."""
    editor = EditorWindow().open("abc")

    assert len(editor.selections) == 1
    assert editor.selections[0].is_empty
