from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

SELECTION_DEDUP_MODES = ("identity", "structural", "always")


@dataclass(slots=True)
class PanelSettings:
    """Configuration block for the stats panel."""

    view_type: str = "fitz"
    title: str = "Fitzgerald"
    column: int = 2
    media_dir: str = "media"
    error_message: str = "Could not calculate statistics"
    hover_message: str = "Difficult word!"


@dataclass(slots=True)
class FitzgeraldConfig:
    """Configuration options for analysis and display synchronization."""

    display_threshold: int = 3
    candidate_threshold: int = 2
    easy_words_path: str | None = None
    language: str = "en_US"
    selection_dedup: str = "identity"
    per_selection_anchors: bool = False
    clear_on_no_editor: bool = False
    panel: PanelSettings = field(default_factory=PanelSettings)

    def __post_init__(self) -> None:
        if self.selection_dedup not in SELECTION_DEDUP_MODES:
            raise ValueError(
                f"Unknown selection_dedup '{self.selection_dedup}'; "
                f"expected one of {', '.join(SELECTION_DEDUP_MODES)}."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(FitzgeraldConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "panel" in data:
        panel_value = data["panel"]
        if isinstance(panel_value, PanelSettings):
            kwargs["panel"] = panel_value
        elif isinstance(panel_value, Mapping):
            kwargs["panel"] = _build_panel_settings(panel_value)
        else:
            kwargs.pop("panel")
    return kwargs


def _build_panel_settings(data: Mapping[str, Any]) -> PanelSettings:
    panel_allowed = {field.name for field in fields(PanelSettings)}
    filtered = {key: data[key] for key in data if key in panel_allowed}
    return PanelSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> FitzgeraldConfig:
    """Build a FitzgeraldConfig from a dictionary-like input."""
    if data is None:
        return FitzgeraldConfig()
    return FitzgeraldConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> FitzgeraldConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> FitzgeraldConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return FitzgeraldConfig()
    return config_from_yaml(path)
