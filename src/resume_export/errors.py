"""Exceptions raised by the export engine.

Every :class:`ExportError` is terminal for the current export attempt and
carries a message that can be shown to the user as-is.  Cancelling the
filename prompt is *not* an error and never raises.
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "EmptyRasterError",
    "ExportError",
    "MissingSnapshotError",
    "PreviewUnavailableError",
    "RasterEncodingError",
]


class ExportError(RuntimeError):
    """Base class for failures that abort an export."""

    default_message = "Export failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class PreviewUnavailableError(ExportError):
    """Raised when the live preview root cannot be found for a snapshot."""

    default_message = "Resume preview not available. Please view the preview first, then export."


class EmptyRasterError(ExportError):
    """Raised when rasterizing the preview produced a zero-sized image."""

    default_message = "Rendering the preview produced an empty image."


class RasterEncodingError(ExportError):
    """Raised when the rendered preview could not be encoded as an image."""

    default_message = "Could not convert the rendered preview to image data."


class MissingSnapshotError(ExportError):
    """Raised when styled HTML is requested without a captured preview."""

    default_message = "HTML export needs the resume preview. Please view the preview first."


class ConfigError(ValueError):
    """Raised when an environment setting holds an invalid value."""
