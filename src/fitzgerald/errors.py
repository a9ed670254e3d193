from __future__ import annotations


class FitzgeraldError(RuntimeError):
    """Base class for recoverable analysis and display failures."""


class NoActiveDocument(FitzgeraldError):
    """Raised when there is no text surface to analyze."""

    def __init__(self, message: str = "No active text document.") -> None:
        super().__init__(message)


class LookupMiss(FitzgeraldError, KeyError):
    """Raised when the panel view has no slot for a stat key."""

    def __init__(self, stat_key: str) -> None:
        super().__init__(f"Could not find view for stat '{stat_key}'")
        self.stat_key = stat_key

    def __str__(self) -> str:
        return str(self.args[0])


class MissingHostContext(FitzgeraldError):
    """Raised when a panel must be created but no resource root was supplied."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "A resource root is required the first time the panel is shown."
        )
