"""Export services: filenames, rasterization, printing and orchestration."""

from resume_export.services.coordinator import ExportCoordinator
from resume_export.services.filename import FilenameResolver, default_filename
from resume_export.services.printing import (
    BrowserPrintMechanism,
    DocumentTitle,
    PrintMechanism,
    title_override,
)
from resume_export.services.raster import RasterPaginator, Rasterizer, VisualTreeHost, page_offsets
from resume_export.services.sinks import DirectorySaveSink, SaveSink

__all__ = [
    "BrowserPrintMechanism",
    "DirectorySaveSink",
    "DocumentTitle",
    "ExportCoordinator",
    "FilenameResolver",
    "PrintMechanism",
    "RasterPaginator",
    "Rasterizer",
    "SaveSink",
    "VisualTreeHost",
    "default_filename",
    "page_offsets",
    "title_override",
]
