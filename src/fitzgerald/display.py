"""
Keeps the stats panel in step with analysis results.

One panel exists per session. It is created the first time results are
shown, which needs the host's resource root, and revealed only then so that
later updates never pull focus away from the text being edited.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Tuple, TypedDict

from .config import PanelSettings
from .errors import MissingHostContext
from .models import AnalysisResult

logger = logging.getLogger(__name__)

PanelMessage = Mapping[str, Any]
MessageCallback = Callable[[PanelMessage], None]


class RefreshMessage(TypedDict):
    command: str
    stats: Dict[str, Any]


class ErrorMessage(TypedDict):
    command: str
    message: str


class ClearMessage(TypedDict):
    command: str


def refresh_message(result: AnalysisResult) -> RefreshMessage:
    return {"command": "refresh", "stats": result.to_stats_payload()}


def error_message(message: str) -> ErrorMessage:
    return {"command": "error", "message": message}


def clear_message() -> ClearMessage:
    return {"command": "clear"}


class Panel(ABC):
    """Rendering surface that consumes display messages."""

    @abstractmethod
    def post_message(self, message: PanelMessage) -> None:
        raise NotImplementedError

    @abstractmethod
    def reveal(self, column: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def on_did_receive_message(self, callback: MessageCallback) -> None:
        """Register a callback for messages sent back by the panel."""
        raise NotImplementedError


class PanelHost(ABC):
    """Creates panels on behalf of the display."""

    @abstractmethod
    def create_panel(
        self, view_type: str, title: str, column: int, resource_root: Path
    ) -> Panel:
        raise NotImplementedError


class DisplaySync:
    """Owns the session's panel and pushes one message to it per update."""

    def __init__(self, host: PanelHost, settings: PanelSettings | None = None) -> None:
        self._host = host
        self._settings = settings or PanelSettings()
        self.panel: Panel | None = None
        self.inbound: List[PanelMessage] = []

    def show(
        self, result: AnalysisResult | None, resource_root: str | Path | None = None
    ) -> bool:
        """
        Display a result, or the fallback error when there is none.

        Returns False when the update was dropped because the panel does not
        exist yet and no resource root was supplied to create it.
        """
        try:
            panel, created = self._ensure_panel(resource_root)
        except MissingHostContext as exc:
            logger.warning("Dropping display update: %s", exc)
            return False

        if result is None:
            panel.post_message(error_message(self._settings.error_message))
        else:
            panel.post_message(refresh_message(result))

        if created:
            panel.reveal(self._settings.column)
        return True

    def clear(self) -> bool:
        """Blank the panel. Nothing happens when no panel has been created."""
        if self.panel is None:
            return False
        self.panel.post_message(clear_message())
        return True

    def _ensure_panel(self, resource_root: str | Path | None) -> Tuple[Panel, bool]:
        if self.panel is not None:
            return self.panel, False
        if resource_root is None:
            raise MissingHostContext()
        settings = self._settings
        panel = self._host.create_panel(
            settings.view_type,
            settings.title,
            settings.column,
            Path(resource_root) / settings.media_dir,
        )
        panel.on_did_receive_message(self._on_panel_message)
        self.panel = panel
        logger.debug("Created %s panel in column %d", settings.view_type, settings.column)
        return panel, True

    def _on_panel_message(self, message: PanelMessage) -> None:
        self.inbound.append(message)
        if message.get("command") == "wordActivated":
            logger.info("Difficult word activated in panel: %s", message.get("word"))
        else:
            logger.info("Unhandled panel message: %r", message)
