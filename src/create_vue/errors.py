"""Custom exception types used by the scaffolder."""

from __future__ import annotations

__all__ = ["OperationCancelled", "TemplateRenderingError"]


class OperationCancelled(RuntimeError):
    """Raised when the user declines a confirmation or interrupts a prompt."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""
