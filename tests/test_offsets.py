from fitzgerald.editor import Position, Range, TextDocument
from fitzgerald.offsets import AnchorSegment, resolve_ranges, resolve_segmented_ranges


def test_resolve_ranges_without_anchor_uses_document_offsets():
    """Without an anchor spans are absolute document offsets."""
    doc = TextDocument("hello world")

    ranges = resolve_ranges({"world": [(6, 11)]}, doc)

    assert ranges == [Range(Position(0, 6), Position(0, 11))]
    assert doc.get_text(ranges[0]) == "world"


def test_resolve_ranges_relative_to_anchor():
    """Anchored spans are placed relative to the anchor position."""
    doc = TextDocument("intro line\nthe magnificent view")
    anchor = Position(1, 4)

    ranges = resolve_ranges({"magnificent": [(0, 11)]}, doc, anchor)

    assert ranges == [Range(Position(1, 4), Position(1, 15))]
    assert doc.get_text(ranges[0]) == "magnificent"


def test_anchored_spans_cross_line_boundaries():
    """Anchored spans may land on lines after the anchor."""
    doc = TextDocument("hello there\nremarkable day")
    # Selection starts at "there"; analyzed text is "there\nremarkable day".
    anchor = Position(0, 6)

    ranges = resolve_ranges({"remarkable": [(6, 16)]}, doc, anchor)

    assert ranges == [Range(Position(1, 0), Position(1, 10))]


def test_resolve_ranges_keeps_map_order():
    """Ranges follow the word map's key and span order."""
    doc = TextDocument("alpha beta alpha")

    ranges = resolve_ranges({"alpha": [(0, 5), (11, 16)], "beta": [(6, 10)]}, doc)

    assert [doc.get_text(r) for r in ranges] == ["alpha", "alpha", "beta"]
    assert ranges[1].start == Position(0, 11)


def test_segmented_ranges_use_each_selection_anchor():
    """Each span uses the anchor of the selection it falls in."""
    doc = TextDocument("one remarkable\ntwo tremendous")
    # Analyzed text: "remarkable tremendous" built from two selections.
    segments = [
        AnchorSegment(text_offset=0, anchor=Position(0, 4)),
        AnchorSegment(text_offset=11, anchor=Position(1, 4)),
    ]
    word_map = {"remarkable": [(0, 10)], "tremendous": [(11, 21)]}

    ranges = resolve_segmented_ranges(word_map, doc, segments)

    assert [doc.get_text(r) for r in ranges] == ["remarkable", "tremendous"]


def test_segmented_ranges_without_segments_fall_back_to_offsets():
    """No segments means plain document offsets."""
    doc = TextDocument("hello world")

    assert resolve_segmented_ranges({"world": [(6, 11)]}, doc, []) == [
        Range(Position(0, 6), Position(0, 11))
    ]
