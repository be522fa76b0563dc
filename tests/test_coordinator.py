"""Tests for export orchestration."""

from __future__ import annotations

import asyncio
import io
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from conftest import FIXED_DATE, make_resume
from docx import Document as open_docx
from PIL import Image

from resume_export.config import ExportSettings
from resume_export.errors import MissingSnapshotError, PreviewUnavailableError
from resume_export.models import ExportFormat, PersonalInfo, Resume
from resume_export.services import (
    BrowserPrintMechanism,
    DocumentTitle,
    ExportCoordinator,
    FilenameResolver,
    RasterPaginator,
    title_override,
)
from resume_export.snapshot import StyleSnapshotEngine

DEFAULT_STEM = "Ada_Lovelace_Resume_2024-03-05"


class RecordingSink:
    def __init__(self) -> None:
        self.saved: list[tuple[bytes, str, str]] = []

    def save(self, payload: bytes, filename: str, media_type: str) -> None:
        self.saved.append((payload, filename, media_type))


class RecordingPrinter:
    """Captures the document title visible while the dialog opens."""

    def __init__(self, title: DocumentTitle, error: Exception | None = None) -> None:
        self.title = title
        self.error = error
        self.seen_titles: list[str] = []

    def trigger(self) -> None:
        self.seen_titles.append(self.title.value)
        if self.error is not None:
            raise self.error


class FakeHost:
    def mount(self, node):
        return node

    def unmount(self, handle) -> None:
        pass


class FakeRasterizer:
    async def rasterize(self, node, scale):
        return Image.new("RGB", (1588, 2400), "white")


def _coordinator(settings: ExportSettings, **kwargs) -> tuple[ExportCoordinator, RecordingSink]:
    sink = RecordingSink()
    kwargs.setdefault("filename_resolver", FilenameResolver(today=lambda: FIXED_DATE))
    return ExportCoordinator(settings, sink, **kwargs), sink


def _export(coordinator: ExportCoordinator, resume: Resume, fmt, tree=None):
    return asyncio.run(coordinator.export(resume, fmt, tree))


# ---------------------------------------------------------------------------
# Document formats
# ---------------------------------------------------------------------------


class TestDocumentExports:
    def test_markdown_saved(self, full_resume, no_prompt_settings) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        result = _export(coordinator, full_resume, ExportFormat.MARKDOWN)

        assert result.filename == f"{DEFAULT_STEM}.md"
        assert not result.cancelled
        [(payload, filename, media_type)] = sink.saved
        assert filename == f"{DEFAULT_STEM}.md"
        assert media_type == "text/markdown"
        assert payload.decode("utf-8").startswith("# Ada Lovelace\n\n")

    @pytest.mark.parametrize(
        ("fmt", "extension", "media_type"),
        [
            ("latex", "tex", "text/x-latex"),
            ("txt", "txt", "text/plain"),
            ("json", "json", "application/json"),
        ],
    )
    def test_format_metadata(self, full_resume, no_prompt_settings, fmt, extension, media_type) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        _export(coordinator, full_resume, fmt)
        [(_, filename, saved_type)] = sink.saved
        assert filename == f"{DEFAULT_STEM}.{extension}"
        assert saved_type == media_type

    def test_text_payload_is_utf8(self, no_prompt_settings) -> None:
        resume = make_resume(personal_info=PersonalInfo(first_name="Zoë"))
        coordinator, sink = _coordinator(no_prompt_settings)
        _export(coordinator, resume, "txt")
        assert "Zoë".encode() in sink.saved[0][0]

    def test_docx_payload(self, full_resume, no_prompt_settings) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        _export(coordinator, full_resume, ExportFormat.DOCX)
        payload, filename, _ = sink.saved[0]
        assert filename.endswith(".docx")
        doc = open_docx(io.BytesIO(payload))
        assert any(p.text == "Ada Lovelace" for p in doc.paragraphs)

    def test_json_round_trip(self, full_resume, no_prompt_settings) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        _export(coordinator, full_resume, ExportFormat.JSON)
        assert Resume.model_validate_json(sink.saved[0][0]) == full_resume


# ---------------------------------------------------------------------------
# Filename prompt
# ---------------------------------------------------------------------------


class TestFilenamePrompt:
    def test_cancel_does_nothing(self, full_resume) -> None:
        engine = MagicMock()
        paginator = MagicMock()
        coordinator, sink = _coordinator(
            ExportSettings(prompt_export_filename=True),
            filename_resolver=FilenameResolver(prompt=lambda _: None, today=lambda: FIXED_DATE),
            snapshot_engine=engine,
            paginator=paginator,
        )
        for fmt in (ExportFormat.HTML, ExportFormat.PDF, ExportFormat.MARKDOWN):
            result = _export(coordinator, full_resume, fmt)
            assert result.cancelled
            assert result.filename is None

        assert sink.saved == []
        engine.capture.assert_not_called()
        paginator.render_to_pages.assert_not_called()

    def test_cancel_skips_print(self, full_resume) -> None:
        title = DocumentTitle("Editor")
        printer = RecordingPrinter(title)
        coordinator, _ = _coordinator(
            ExportSettings(prompt_export_filename=True, title_restore_delay=0),
            filename_resolver=FilenameResolver(prompt=lambda _: None, today=lambda: FIXED_DATE),
            title=title,
            print_mechanism=printer,
        )
        result = _export(coordinator, full_resume, ExportFormat.PRINT)
        assert result.cancelled
        assert printer.seen_titles == []

    def test_entered_name_used(self, full_resume) -> None:
        coordinator, sink = _coordinator(
            ExportSettings(prompt_export_filename=True),
            filename_resolver=FilenameResolver(
                prompt=lambda _: "ada cv", today=lambda: FIXED_DATE
            ),
        )
        _export(coordinator, full_resume, ExportFormat.TXT)
        assert sink.saved[0][1] == "ada_cv.txt"


# ---------------------------------------------------------------------------
# Preview-based formats
# ---------------------------------------------------------------------------


class TestPreviewExports:
    def test_html_from_preview(self, full_resume, no_prompt_settings, preview_tree) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        _export(coordinator, full_resume, ExportFormat.HTML, preview_tree)
        payload, filename, media_type = sink.saved[0]
        html = payload.decode("utf-8")
        assert filename == f"{DEFAULT_STEM}.html"
        assert media_type == "text/html"
        assert "Ada &lt;Lovelace&gt;" in html
        assert "<button" not in html

    def test_html_without_preview(self, full_resume, no_prompt_settings) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        with pytest.raises(MissingSnapshotError):
            _export(coordinator, full_resume, ExportFormat.HTML)
        assert sink.saved == []

    def test_pdf_without_paginator(self, full_resume, no_prompt_settings, preview_tree) -> None:
        coordinator, sink = _coordinator(no_prompt_settings)
        with pytest.raises(PreviewUnavailableError):
            _export(coordinator, full_resume, ExportFormat.PDF, preview_tree)
        assert sink.saved == []

    def test_pdf_without_preview(self, full_resume, no_prompt_settings) -> None:
        paginator = RasterPaginator(
            StyleSnapshotEngine(), FakeHost(), FakeRasterizer(), settle_delay=0
        )
        coordinator, sink = _coordinator(no_prompt_settings, paginator=paginator)
        with pytest.raises(PreviewUnavailableError):
            _export(coordinator, full_resume, ExportFormat.PDF)
        assert sink.saved == []

    def test_pdf_saved(self, full_resume, no_prompt_settings, preview_tree) -> None:
        paginator = RasterPaginator(
            StyleSnapshotEngine(), FakeHost(), FakeRasterizer(), settle_delay=0
        )
        coordinator, sink = _coordinator(no_prompt_settings, paginator=paginator)
        result = _export(coordinator, full_resume, ExportFormat.PDF, preview_tree)

        payload, filename, media_type = sink.saved[0]
        assert result.filename == filename == f"{DEFAULT_STEM}.pdf"
        assert media_type == "application/pdf"
        assert payload.startswith(b"%PDF")

    def test_pdf_paginator_uses_configured_settle_delay(self, full_resume, preview_tree) -> None:
        settings = ExportSettings(prompt_export_filename=False, settle_delay=0.25)
        coordinator, sink = _coordinator(settings, host=FakeHost(), rasterizer=FakeRasterizer())

        with patch(
            "resume_export.services.raster.asyncio.sleep", new_callable=AsyncMock
        ) as sleep:
            _export(coordinator, full_resume, ExportFormat.PDF, preview_tree)

        sleep.assert_awaited_once_with(0.25)
        assert sink.saved[0][0].startswith(b"%PDF")


# ---------------------------------------------------------------------------
# Print path
# ---------------------------------------------------------------------------


class TestPrintExports:
    @pytest.mark.parametrize("fmt", [ExportFormat.PRINT, ExportFormat.PDF_PRINT])
    def test_title_set_while_printing(self, full_resume, no_prompt_settings, fmt) -> None:
        title = DocumentTitle("Resume Editor")
        printer = RecordingPrinter(title)
        coordinator, sink = _coordinator(
            no_prompt_settings, title=title, print_mechanism=printer
        )
        result = _export(coordinator, full_resume, fmt)

        assert printer.seen_titles == [DEFAULT_STEM]
        assert title.value == "Resume Editor"
        assert result.filename == f"{DEFAULT_STEM}.pdf"
        assert sink.saved == []

    def test_title_restored_on_failure(self, full_resume, no_prompt_settings) -> None:
        title = DocumentTitle("Resume Editor")
        printer = RecordingPrinter(title, error=RuntimeError("no printer"))
        coordinator, _ = _coordinator(no_prompt_settings, title=title, print_mechanism=printer)

        with pytest.raises(RuntimeError, match="no printer"):
            _export(coordinator, full_resume, ExportFormat.PDF_PRINT)
        assert title.value == "Resume Editor"

    def test_requires_print_mechanism(self, full_resume, no_prompt_settings) -> None:
        coordinator, _ = _coordinator(no_prompt_settings)
        with pytest.raises(ValueError, match="print mechanism"):
            _export(coordinator, full_resume, ExportFormat.PRINT)


class TestPrintingHelpers:
    def test_title_override_restores(self) -> None:
        title = DocumentTitle("Editor")
        with title_override(title, "Ada_Resume") as scoped:
            assert scoped.value == "Ada_Resume"
        assert title.value == "Editor"

    def test_title_override_restores_after_error(self) -> None:
        title = DocumentTitle("Editor")
        with pytest.raises(KeyError), title_override(title, "Ada_Resume"):
            raise KeyError("boom")
        assert title.value == "Editor"

    def test_browser_print_mechanism(self) -> None:
        with patch("webbrowser.open_new_tab") as open_tab:
            BrowserPrintMechanism("http://localhost:5173/print/resume-1").trigger()
        open_tab.assert_called_once_with("http://localhost:5173/print/resume-1")
