"""Export orchestration.

Resolves the filename first (a cancelled prompt ends the export before
anything else happens), then captures, encodes or rasterizes as the
format requires and hands the payload to the save sink.  Print formats go
through the platform print dialog instead.
"""

from __future__ import annotations

import asyncio
import logging

from resume_export.config import ExportSettings
from resume_export.encoders import get_encoder
from resume_export.errors import ExportError, PreviewUnavailableError
from resume_export.models import (
    EXPORT_FORMATS,
    PRINT_FORMATS,
    ExportFormat,
    ExportResult,
    Resume,
)
from resume_export.services.filename import FilenameResolver
from resume_export.services.printing import DocumentTitle, PrintMechanism, title_override
from resume_export.services.raster import RasterPaginator, Rasterizer, VisualTreeHost
from resume_export.services.sinks import SaveSink
from resume_export.snapshot import StyleSnapshotEngine, VisualNode

logger = logging.getLogger(__name__)

__all__ = ["ExportCoordinator"]


class ExportCoordinator:
    """Dispatch export requests to encoders, the paginator or the print path.

    Args:
        settings: Export settings (filename prompt, delays).
        save_sink: Receives encoded payloads.
        filename_resolver: Resolves (and optionally prompts for) filenames.
        snapshot_engine: Captures the live preview for HTML export.
        paginator: Renders the preview for image-based PDF export.
        host: Off-screen mount point; together with *rasterizer* it builds
            a paginator honouring ``settings.settle_delay`` when none is given.
        rasterizer: Paints mounted clones for image-based PDF export.
        title: Shared document title overridden by the print path.
        print_mechanism: Opens the platform print dialog.
    """

    def __init__(
        self,
        settings: ExportSettings,
        save_sink: SaveSink,
        *,
        filename_resolver: FilenameResolver | None = None,
        snapshot_engine: StyleSnapshotEngine | None = None,
        paginator: RasterPaginator | None = None,
        host: VisualTreeHost | None = None,
        rasterizer: Rasterizer | None = None,
        title: DocumentTitle | None = None,
        print_mechanism: PrintMechanism | None = None,
    ) -> None:
        self.settings = settings
        self.save_sink = save_sink
        self.filename_resolver = filename_resolver or FilenameResolver()
        self.snapshot_engine = snapshot_engine or StyleSnapshotEngine()
        if paginator is None and host is not None and rasterizer is not None:
            paginator = RasterPaginator(
                self.snapshot_engine, host, rasterizer, settle_delay=settings.settle_delay
            )
        self.paginator = paginator
        self.title = title or DocumentTitle()
        self.print_mechanism = print_mechanism

    async def export(
        self,
        resume: Resume,
        export_format: ExportFormat | str,
        tree: VisualNode | None = None,
    ) -> ExportResult:
        """Export *resume* in *export_format*.

        Args:
            resume: Resume snapshot to export.
            export_format: Requested format.
            tree: Live preview tree; needed for ``html`` and ``pdf``.

        Returns:
            The result; ``cancelled`` is set when the filename prompt was
            dismissed, in which case nothing was saved or printed.

        Raises:
            ExportError: If the export failed.  Nothing was saved.
        """
        export_format = ExportFormat(export_format)
        info = EXPORT_FORMATS[export_format]

        filename = self.filename_resolver.resolve(resume, info.extension, self.settings)
        if filename is None:
            logger.info("Export of %s as %s cancelled", resume.id, export_format.value)
            return ExportResult(format=export_format, filename=None, cancelled=True)

        logger.info("Exporting %s as %s to %s", resume.id, export_format.value, filename)
        try:
            if export_format in PRINT_FORMATS:
                await self._print(filename)
                return ExportResult(format=export_format, filename=filename)

            payload = await self._encode(resume, export_format, tree)
        except ExportError as exc:
            logger.warning("Export of %s as %s failed: %s", resume.id, export_format.value, exc)
            raise

        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        self.save_sink.save(payload, filename, info.media_type)
        return ExportResult(format=export_format, filename=filename)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    async def _encode(
        self, resume: Resume, export_format: ExportFormat, tree: VisualNode | None
    ) -> str | bytes:
        if export_format is ExportFormat.PDF:
            if self.paginator is None:
                raise PreviewUnavailableError()
            return await self.paginator.render_to_pages(tree)

        snapshot = None
        if export_format is ExportFormat.HTML:
            snapshot = self.snapshot_engine.capture(tree)
        return await get_encoder(export_format).encode_async(resume, snapshot)

    async def _print(self, filename: str) -> None:
        if self.print_mechanism is None:
            raise ValueError("No print mechanism configured")

        suggested = filename.rsplit(".", 1)[0]
        with title_override(self.title, suggested):
            self.print_mechanism.trigger()
            await asyncio.sleep(self.settings.title_restore_delay)
