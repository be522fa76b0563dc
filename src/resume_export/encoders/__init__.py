"""Encoder registry for resume export."""

from __future__ import annotations

from resume_export.encoders.base import ResumeEncoder
from resume_export.encoders.canonical_json import JsonEncoder
from resume_export.encoders.html import HtmlEncoder
from resume_export.encoders.latex import LatexEncoder
from resume_export.encoders.markdown import MarkdownEncoder
from resume_export.encoders.plain_text import PlainTextEncoder
from resume_export.encoders.word import DocxEncoder
from resume_export.models import ExportFormat

__all__ = [
    "DocxEncoder",
    "HtmlEncoder",
    "JsonEncoder",
    "LatexEncoder",
    "MarkdownEncoder",
    "PlainTextEncoder",
    "ResumeEncoder",
    "get_encoder",
    "list_encoders",
]

_REGISTRY: dict[ExportFormat, ResumeEncoder] = {
    encoder.format_id: encoder
    for encoder in (
        LatexEncoder(),
        DocxEncoder(),
        HtmlEncoder(),
        MarkdownEncoder(),
        PlainTextEncoder(),
        JsonEncoder(),
    )
}


def get_encoder(format_id: ExportFormat | str) -> ResumeEncoder:
    """Return the encoder registered for *format_id*.

    Raises:
        ValueError: If no encoder handles that format.
    """
    try:
        return _REGISTRY[ExportFormat(format_id)]
    except (KeyError, ValueError):
        available = ", ".join(sorted(f.value for f in _REGISTRY))
        msg = f"No encoder for format {format_id!r}. Available: {available}"
        raise ValueError(msg) from None


def list_encoders() -> list[str]:
    """Return sorted format ids of all registered encoders."""
    return sorted(f.value for f in _REGISTRY)
