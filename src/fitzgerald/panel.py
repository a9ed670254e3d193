from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Collection, Dict, List, Mapping, Sequence, Tuple

from .display import MessageCallback, Panel, PanelHost, PanelMessage
from .errors import LookupMiss

logger = logging.getLogger(__name__)

# The maximum a Flesch reading-ease score can reach.
MAX_READING_EASE = 121.22

FIELD_LABELS: Dict[str, str] = {
    "friendlyGrade": "Grade Band",
    "fleschKincaid": "Flesch-Kincaid Grade Level",
    "gunningFog": "The Fog Scale",
    "smog": "The Smog Index",
    "automatedReadability": "Automated Readability Index",
    "colemanLiau": "The Coleman-Liau Index",
    "linsearWrite": "Linsear Write Formula",
    "daleChall": "Dale-Chall Readability Score",
    "words": "Words",
    "sentences": "Sentences",
    "syllables": "Syllables",
}

# Stat keys the view has a slot for. grade, flesch and difficultWords have
# dedicated widgets and are not part of the schema.
STAT_FIELDS: Tuple[str, ...] = tuple(FIELD_LABELS)


@dataclass(frozen=True, slots=True)
class FieldReport:
    present: Tuple[str, ...]
    missing: Tuple[str, ...]


def validate_fields(stats: Mapping[str, Any], available: Collection[str]) -> FieldReport:
    """Split the incoming stat keys into those the view can show and the rest."""
    present = tuple(key for key in stats if key in available)
    missing = tuple(key for key in stats if key not in available)
    return FieldReport(present=present, missing=missing)


def format_grade(grade: Any) -> str:
    """Show whole-number grades without a trailing '.0'."""
    if isinstance(grade, float) and grade.is_integer():
        return f"{int(grade)}"
    return f"{grade}"


def ordinal_suffix(grade: Any) -> str:
    return {1: "st", 2: "nd", 3: "rd"}.get(grade, "th")


class PanelView(Panel):
    """State of a rendered stats panel, driven entirely by incoming messages."""

    def __init__(
        self,
        view_type: str = "fitz",
        title: str = "Fitzgerald",
        resource_root: Path | None = None,
        fields: Sequence[str] = STAT_FIELDS,
    ) -> None:
        self.view_type = view_type
        self.title = title
        self.resource_root = resource_root
        self._fields: Dict[str, str | None] = {key: None for key in fields}
        self._callbacks: List[MessageCallback] = []
        self.messages: List[PanelMessage] = []
        self.reveals: List[int] = []

        self.stat_panels_visible = True
        self.warning: str | None = None
        self.warning_visible = False
        self.empty_state_visible = False
        self.grade = ""
        self.grade_suffix = "th"
        self.gauge_label = ""
        self.gauge_percent = 0.0
        self.difficult_words: List[str] = []
        self.last_report = FieldReport(present=(), missing=())

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    def field(self, stat_key: str) -> str | None:
        """Return the displayed text of a stat, or None if it was never set."""
        if stat_key not in self._fields:
            raise LookupMiss(stat_key)
        return self._fields[stat_key]

    def post_message(self, message: PanelMessage) -> None:
        self.messages.append(message)
        command = message.get("command")
        if command == "refresh":
            self._refresh(message.get("stats") or {})
        elif command == "error":
            self._show_error(message.get("message") or "Unknown error")
        elif command == "clear":
            self._clear()
        else:
            logger.warning("Unrecognized panel command: %r", command)

    def reveal(self, column: int) -> None:
        self.reveals.append(column)

    def on_did_receive_message(self, callback: MessageCallback) -> None:
        self._callbacks.append(callback)

    def activate_word(self, word: str) -> None:
        """Report that the user picked a word from the difficult-word list."""
        message = {"command": "wordActivated", "word": word}
        for callback in list(self._callbacks):
            callback(message)

    def render_text(self) -> str:
        """Render the current panel state as plain text."""
        lines = [self.title, "=" * len(self.title)]
        if self.warning_visible and self.warning:
            lines.append(f"! {self.warning}")
        if self.empty_state_visible:
            lines.append("Nothing to show..")
        if not self.stat_panels_visible:
            return "\n".join(lines)

        lines.append(f"Reading ease: {self.gauge_label} ({self.gauge_percent:.0f}%)")
        lines.append(f"Grade: {self.grade}{self.grade_suffix}")
        for key, value in self._fields.items():
            if value is None:
                continue
            label = FIELD_LABELS.get(key, key)
            lines.append(f"{label} {'.' * max(2, 32 - len(label))} {value}")
        lines.append(f"Difficult words ({len(self.difficult_words)}):")
        lines.extend(f"  • {word}" for word in self.difficult_words)
        return "\n".join(lines)

    def _refresh(self, stats: Mapping[str, Any]) -> None:
        self.warning_visible = False
        self.empty_state_visible = False
        self.stat_panels_visible = True

        rest = {
            key: value
            for key, value in stats.items()
            if key not in {"difficultWords", "grade", "flesch"}
        }
        report = validate_fields(rest, self._fields)
        for key in report.missing:
            logger.warning("%s", LookupMiss(key))
        for key in report.present:
            self._fields[key] = f"{rest[key]}"
        self.last_report = report

        self._refresh_grade(stats.get("grade", 1))
        self._refresh_gauge(stats.get("flesch", 0))
        self._refresh_difficult_words(stats.get("difficultWords", []))

    def _refresh_grade(self, grade: Any) -> None:
        self.grade = format_grade(grade)
        self.grade_suffix = ordinal_suffix(grade)

    def _refresh_gauge(self, reading_ease: float) -> None:
        self.gauge_percent = (reading_ease / MAX_READING_EASE) * 100
        self.gauge_label = f"{reading_ease}"

    def _refresh_difficult_words(self, words: Sequence[str]) -> None:
        # Each word is prepended to the list as it is rendered.
        self.difficult_words = list(reversed(words))

    def _show_error(self, message: str) -> None:
        self.stat_panels_visible = False
        self.warning = message
        self.warning_visible = True
        logger.error("Panel error: %s", message)

    def _clear(self) -> None:
        self.stat_panels_visible = False
        self.empty_state_visible = True


class LocalPanelHost(PanelHost):
    """Creates in-process PanelView instances."""

    def __init__(self) -> None:
        self.panels: List[PanelView] = []

    def create_panel(
        self, view_type: str, title: str, column: int, resource_root: Path
    ) -> PanelView:
        panel = PanelView(view_type=view_type, title=title, resource_root=resource_root)
        self.panels.append(panel)
        return panel
