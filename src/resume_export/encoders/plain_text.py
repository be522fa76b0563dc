"""Plain text encoder."""

from __future__ import annotations

from resume_export.encoders.text import TextDocumentEncoder
from resume_export.models import ExportFormat

__all__ = ["PlainTextEncoder"]


class PlainTextEncoder(TextDocumentEncoder):
    """Plain text with underlined headings and ``•`` bullets."""

    bullet = "•"

    @property
    def format_id(self) -> ExportFormat:
        return ExportFormat.TXT

    def heading(self, text: str, level: int) -> str:
        if level == 1:
            return f"{text}\n{'=' * len(text)}"
        if level == 2:
            title = text.upper()
            return f"{title}\n{'-' * len(title)}"
        return text

    def details(self, lines: list[str]) -> str:
        return "\n".join(lines)

    def link(self, label: str, url: str) -> str:
        return f"{label}: {url}"
