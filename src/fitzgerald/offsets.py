from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Sequence

from .editor import Decoration, DecorationType, Position, Range, TextDocument, TextEditor
from .models import Span

DIFFICULT_WORD_DECORATION = DecorationType(
    key="fitzgerald.difficult-word",
    options={
        "overviewRulerColor": "blue",
        "overviewRulerLane": "left",
        "dark": {"backgroundColor": "#6f4446", "overviewRulerColor": "#6f4446"},
        "light": {"backgroundColor": "#FFC0C2", "overviewRulerColor": "#FFC0C2"},
        "fontWeight": "bold",
    },
)


@dataclass(frozen=True, slots=True)
class AnchorSegment:
    """Where one selection's text starts in the analyzed text and in the document."""

    text_offset: int
    anchor: Position


def resolve_ranges(
    word_map: Mapping[str, Sequence[Span]],
    document: TextDocument,
    anchor: Position | None = None,
) -> List[Range]:
    """
    Convert analyzed-text spans into document ranges.

    With an anchor every span is taken relative to it; without one the spans
    are absolute document offsets.
    """
    ranges: List[Range] = []
    for spans in word_map.values():
        for start, end in spans:
            if anchor is not None:
                ranges.append(
                    Range(
                        document.translate(anchor, start),
                        document.translate(anchor, end),
                    )
                )
            else:
                ranges.append(
                    Range(document.position_at(start), document.position_at(end))
                )
    return ranges


def resolve_segmented_ranges(
    word_map: Mapping[str, Sequence[Span]],
    document: TextDocument,
    segments: Sequence[AnchorSegment],
) -> List[Range]:
    """Convert spans using the anchor of the selection segment each span starts in."""
    if not segments:
        return resolve_ranges(word_map, document)
    offsets = [segment.text_offset for segment in segments]
    ranges: List[Range] = []
    for spans in word_map.values():
        for start, end in spans:
            idx = max(0, bisect.bisect_right(offsets, start) - 1)
            segment = segments[idx]
            ranges.append(
                Range(
                    document.translate(segment.anchor, start - segment.text_offset),
                    document.translate(segment.anchor, end - segment.text_offset),
                )
            )
    return ranges


def apply_decorations(
    editor: TextEditor,
    ranges: Iterable[Range],
    hover_message: str | None = None,
) -> None:
    """Replace the difficult-word decorations of the editor in one call."""
    editor.set_decorations(
        DIFFICULT_WORD_DECORATION,
        [Decoration(range=text_range, hover_message=hover_message) for text_range in ranges],
    )
