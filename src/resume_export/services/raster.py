"""Image-based PDF export.

The preview snapshot is mounted off-screen, rasterized once into a tall
bitmap and laid onto A4 pages: every page shows the *same* image shifted
up by one page height, so each page is a window onto the bitmap rather
than a re-render.
"""

from __future__ import annotations

import asyncio
import io
import logging
from typing import Any, Protocol

from fpdf import FPDF
from PIL import Image

from resume_export.errors import EmptyRasterError, PreviewUnavailableError, RasterEncodingError
from resume_export.snapshot import DEFAULT_ROOT_ID, StyleSnapshotEngine, VisualNode

logger = logging.getLogger(__name__)

__all__ = [
    "A4_HEIGHT_MM",
    "A4_WIDTH_MM",
    "A4_WIDTH_PX",
    "MAX_PAGES",
    "RasterPaginator",
    "Rasterizer",
    "VisualTreeHost",
    "page_offsets",
]

A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0
# A4 width in CSS pixels at 96 dpi.
A4_WIDTH_PX = 794
MAX_PAGES = 10
RASTER_SCALE = 2

_OFFSCREEN_STYLE = {
    "position": "fixed",
    "left": "-10000px",
    "top": "0",
    "background-color": "#ffffff",
}


class VisualTreeHost(Protocol):
    """Live tree that can temporarily host a node for layout."""

    def mount(self, node: VisualNode) -> Any:
        """Attach *node* and return a handle for :meth:`unmount`."""
        ...

    def unmount(self, handle: Any) -> None:
        """Remove a node previously attached by :meth:`mount`."""
        ...


class Rasterizer(Protocol):
    """Paints a mounted node into a bitmap."""

    async def rasterize(self, node: VisualNode, scale: int) -> Image.Image:
        """Return a bitmap of *node* at *scale* times its CSS pixel size."""
        ...


def page_offsets(
    bitmap_width: int,
    bitmap_height: int,
    page_width: float = A4_WIDTH_MM,
    page_height: float = A4_HEIGHT_MM,
    max_pages: int = MAX_PAGES,
) -> tuple[float, list[float]]:
    """Compute the placed image height and the vertical offset of each page.

    Args:
        bitmap_width: Bitmap width in pixels.
        bitmap_height: Bitmap height in pixels.
        page_width: Page width in output units.
        page_height: Page height in output units.
        max_pages: Hard cap on the number of pages.

    Returns:
        ``(image_height, offsets)`` where ``offsets[i]`` is the y position of
        the image on page *i* (0, -page_height, -2 * page_height, ...).
    """
    image_height = bitmap_height * (page_width / bitmap_width)
    height_left = image_height
    offsets = [0.0]
    height_left -= page_height

    while height_left > 0 and len(offsets) < max_pages:
        offsets.append(-len(offsets) * page_height)
        height_left -= page_height

    return image_height, offsets


def _encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    try:
        image.convert("RGB").save(buffer, format="PNG")
    except (OSError, ValueError) as exc:
        raise RasterEncodingError() from exc
    return buffer.getvalue()


def _build_pdf(png: bytes, width: int, height: int) -> bytes:
    image_height, offsets = page_offsets(width, height)
    pdf = FPDF(orientation="portrait", unit="mm", format="A4")
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(0, 0, 0)

    for offset in offsets:
        pdf.add_page()
        pdf.image(io.BytesIO(png), x=0, y=offset, w=A4_WIDTH_MM, h=image_height)

    logger.info("Rendered preview into %d page(s)", len(offsets))
    return bytes(pdf.output())


class RasterPaginator:
    """Render the live preview into a paginated, image-based PDF.

    Args:
        engine: Snapshot engine used to clone the preview.
        host: Live tree the clone is mounted on while rasterizing.
        rasterizer: Paints the mounted clone into a bitmap.
        settle_delay: Seconds to wait for fonts and images before painting.
    """

    def __init__(
        self,
        engine: StyleSnapshotEngine,
        host: VisualTreeHost,
        rasterizer: Rasterizer,
        settle_delay: float = 0.5,
    ) -> None:
        self._engine = engine
        self._host = host
        self._rasterizer = rasterizer
        self._settle_delay = settle_delay

    async def render_to_pages(
        self, tree: VisualNode | None, root_id: str = DEFAULT_ROOT_ID
    ) -> bytes:
        """Return PDF bytes for the preview found in *tree*.

        Raises:
            PreviewUnavailableError: If the preview root is missing.
            EmptyRasterError: If the bitmap has zero width or height.
            RasterEncodingError: If the bitmap cannot be encoded.
        """
        snapshot = self._engine.capture(tree, root_id)
        if snapshot is None:
            raise PreviewUnavailableError()

        clone = snapshot.root
        clone.style["width"] = f"{A4_WIDTH_PX}px"
        clone.style.update(_OFFSCREEN_STYLE)

        handle = self._host.mount(clone)
        try:
            await asyncio.sleep(self._settle_delay)
            bitmap = await self._rasterizer.rasterize(clone, RASTER_SCALE)
            width, height = bitmap.size
            if width == 0 or height == 0:
                raise EmptyRasterError()

            png = _encode_png(bitmap)
            return _build_pdf(png, width, height)
        finally:
            self._host.unmount(handle)
