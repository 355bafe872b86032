"""Error definitions for the batch renderer."""

from typing import Any, Dict, Optional


class BatchError(Exception):
    """Base exception for mermaid-cli-batch errors."""

    def __init__(self, message: str, data: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def to_log_extra(self) -> Dict[str, Any]:
        """Flatten into a dict suitable for ``logging``'s ``extra=``."""
        extra: Dict[str, Any] = {"error": self.message}
        extra.update(self.data)
        return extra


class RenderError(BatchError):
    """The renderer produced no usable markup for one input.

    Recoverable: the batch loop logs it and moves on to the next input.
    """


class ConfigFileError(BatchError):
    """The Mermaid config file could not be turned into a mapping."""
