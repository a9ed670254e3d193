from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict, cast

import typer
import yaml

from .config import FitzgeraldConfig, load_config
from .editor import EditorWindow, Position, Selection, TextDocument, TextEditor
from .offsets import DIFFICULT_WORD_DECORATION
from .panel import PanelView
from .session import Session

app = typer.Typer(help="Fitzgerald readability CLI.", no_args_is_help=True)


class DecorationPayload(TypedDict):
    word: str
    start: Dict[str, int]
    end: Dict[str, int]


class WordPayload(TypedDict):
    word: str
    count: int
    positions: List[str]


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Analyze text readability and highlight difficult words."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    selection: List[str] | None = typer.Option(
        None,
        "--selection",
        "-s",
        help="Character range START:END to analyze; repeat for several selections.",
    ),
    per_selection_anchors: bool | None = typer.Option(
        None,
        "--per-selection-anchors/--first-selection-anchor",
        help="Override how decorations are placed for multiple selections.",
    ),
    output_format: str = typer.Option(
        "json", "--format", "-f", help="Output format: 'json' or 'text'."
    ),
) -> None:
    """Analyze a text file and print the panel update plus decoration ranges."""
    if output_format not in {"json", "text"}:
        raise typer.BadParameter("Format must be 'json' or 'text'.")
    cfg = load_config(config)
    if per_selection_anchors is not None:
        cfg.per_selection_anchors = per_selection_anchors

    text = input_path.read_text(encoding="utf-8")
    window = EditorWindow()
    editor = window.open(text, uri=str(input_path))
    if selection:
        editor.selections = [_parse_selection(editor.document, value) for value in selection]

    # The file's directory stands in for the resource root the panel is created from.
    session = Session(window, cfg, resource_root=input_path.parent)
    session.show_stats()
    panel = cast(PanelView, session.display.panel)

    if output_format == "text":
        typer.echo(panel.render_text())
        return
    payload = {
        "message": panel.messages[-1] if panel.messages else None,
        "decorations": _decorations_payload(editor),
    }
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def words(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    threshold: int | None = typer.Option(
        None, "--threshold", "-t", help="Minimum syllables for a difficult word."
    ),
) -> None:
    """Print every difficult word with the line:column of each occurrence."""
    cfg = load_config(config)
    text = input_path.read_text(encoding="utf-8")
    session = Session(EditorWindow(), cfg)
    word_map = session.index.build(
        text, threshold if threshold is not None else cfg.display_threshold
    )
    document = TextDocument(text)
    entries: List[WordPayload] = []
    for word, spans in word_map.items():
        positions = [_format_position(document.position_at(start)) for start, _ in spans]
        entries.append({"word": word, "count": len(spans), "positions": positions})
    typer.echo(json.dumps({"words": entries}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = FitzgeraldConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _parse_selection(document: TextDocument, value: str) -> Selection:
    """Turn a START:END offset pair into a selection on the document."""
    start_text, sep, end_text = value.partition(":")
    try:
        if not sep:
            raise ValueError(value)
        start, end = int(start_text), int(end_text)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Selection '{value}' must look like START:END."
        ) from exc
    if start < 0 or end < 0:
        raise typer.BadParameter(f"Selection '{value}' has a negative offset.")
    return Selection(document.position_at(start), document.position_at(end))


def _decorations_payload(editor: TextEditor) -> List[DecorationPayload]:
    payload: List[DecorationPayload] = []
    for decoration in editor.decorations(DIFFICULT_WORD_DECORATION):
        text_range = decoration.range
        payload.append(
            {
                "word": editor.document.get_text(text_range),
                "start": _position_dict(text_range.start),
                "end": _position_dict(text_range.end),
            }
        )
    return payload


def _position_dict(position: Position) -> Dict[str, int]:
    return {"line": position.line, "character": position.character}


def _format_position(position: Position) -> str:
    """1-based line:column, the way editors display it."""
    return f"{position.line + 1}:{position.character + 1}"


if __name__ == "__main__":
    main()
