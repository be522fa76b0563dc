"""Markdown encoder."""

from __future__ import annotations

import re

from resume_export.encoders.text import TextDocumentEncoder
from resume_export.models import ExportFormat

__all__ = ["MarkdownEncoder"]

# Line-leading markers Markdown would read as block syntax.
_BLOCK_MARKER = re.compile(r"^([ \t]*)([#>*+-])", re.MULTILINE)


class MarkdownEncoder(TextDocumentEncoder):
    """Developer-friendly Markdown using ATX headings and ``-`` bullets."""

    bullet = "-"

    @property
    def format_id(self) -> ExportFormat:
        return ExportFormat.MARKDOWN

    def heading(self, text: str, level: int) -> str:
        return f"{'#' * level} {text}"

    def details(self, lines: list[str]) -> str:
        # Two trailing spaces force a hard line break between detail lines.
        return "  \n".join(lines)

    def link(self, label: str, url: str) -> str:
        return f"[{label}]({url})"

    def free_text(self, value: str) -> str:
        return _BLOCK_MARKER.sub(r"\1\\\2", value)
