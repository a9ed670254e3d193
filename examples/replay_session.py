"""Minimal example replaying an editing session against the stats panel."""

from __future__ import annotations

from pathlib import Path

from fitzgerald import EditorWindow, Session, load_config
from fitzgerald.editor import Position, Selection
from fitzgerald.panel import PanelView


def main() -> None:
    config = load_config()
    config.clear_on_no_editor = True

    window = EditorWindow()
    session = Session(window, config, resource_root=Path(__file__).parent)
    session.activate()

    editor = window.open(
        "The committee deliberated extensively before reaching a decision.\n"
        "Everyone agreed the outcome was satisfactory."
    )
    session.show_stats()
    panel = session.display.panel
    assert isinstance(panel, PanelView)
    print(panel.render_text())

    window.select(editor, [Selection(Position(1, 0), Position(1, 45))])
    print("\nAfter selecting the second line:\n")
    print(panel.render_text())

    window.show(None)
    print("\nAfter closing the editor:\n")
    print(panel.render_text())


if __name__ == "__main__":
    main()
