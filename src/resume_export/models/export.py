"""Export format metadata and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "EXPORT_FORMATS",
    "ExportFormat",
    "ExportFormatInfo",
    "ExportResult",
    "PRINT_FORMATS",
]


class ExportFormat(str, Enum):
    """Every output the export menu offers."""

    LATEX = "latex"
    DOCX = "docx"
    HTML = "html"
    MARKDOWN = "markdown"
    TXT = "txt"
    JSON = "json"
    PDF = "pdf"
    PRINT = "print"
    PDF_PRINT = "pdf-print"


@dataclass(frozen=True, slots=True)
class ExportFormatInfo:
    """Display and file metadata for one export format.

    Attributes:
        id: Format identifier.
        label: Menu label.
        description: One-line menu description.
        extension: File extension without the leading dot.
        media_type: MIME type handed to the save sink.
    """

    id: ExportFormat
    label: str
    description: str
    extension: str
    media_type: str


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Outcome of an export that did not fail.

    Attributes:
        format: Requested format.
        filename: Resolved filename, or *None* when the prompt was cancelled.
        cancelled: True when the user cancelled the filename prompt.
    """

    format: ExportFormat
    filename: str | None
    cancelled: bool = False


# Formats routed through the platform print dialog instead of a save sink.
PRINT_FORMATS: frozenset[ExportFormat] = frozenset({ExportFormat.PRINT, ExportFormat.PDF_PRINT})

EXPORT_FORMATS: dict[ExportFormat, ExportFormatInfo] = {
    ExportFormat.LATEX: ExportFormatInfo(
        ExportFormat.LATEX,
        "LaTeX",
        "LaTeX source document - Compile to PDF with full control",
        "tex",
        "text/x-latex",
    ),
    ExportFormat.DOCX: ExportFormatInfo(
        ExportFormat.DOCX,
        "Word Document",
        "Microsoft Word format - Editable and ATS-friendly",
        "docx",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ),
    ExportFormat.HTML: ExportFormatInfo(
        ExportFormat.HTML,
        "HTML",
        "Web page with embedded styles - Universal compatibility",
        "html",
        "text/html",
    ),
    ExportFormat.MARKDOWN: ExportFormatInfo(
        ExportFormat.MARKDOWN,
        "Markdown",
        "Plain text format - Developer-friendly and version-control ready",
        "md",
        "text/markdown",
    ),
    ExportFormat.TXT: ExportFormatInfo(
        ExportFormat.TXT,
        "Plain Text",
        "Simple text file - Maximum compatibility",
        "txt",
        "text/plain",
    ),
    ExportFormat.JSON: ExportFormatInfo(
        ExportFormat.JSON,
        "JSON",
        "Structured data format - For backup and data portability",
        "json",
        "application/json",
    ),
    ExportFormat.PDF: ExportFormatInfo(
        ExportFormat.PDF,
        "PDF",
        "Paginated image-based PDF rendered from the preview",
        "pdf",
        "application/pdf",
    ),
    ExportFormat.PRINT: ExportFormatInfo(
        ExportFormat.PRINT,
        "Print",
        "Open print preview",
        "pdf",
        "application/pdf",
    ),
    ExportFormat.PDF_PRINT: ExportFormatInfo(
        ExportFormat.PDF_PRINT,
        "PDF (print dialog)",
        "Via browser print dialog",
        "pdf",
        "application/pdf",
    ),
}
