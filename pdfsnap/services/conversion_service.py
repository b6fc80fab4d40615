from __future__ import annotations

import asyncio
from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from pdfsnap.core.logging import configure_logging
from pdfsnap.models import ConversionResult, SelectedImage, Severity, Workspace
from pdfsnap.services.toast_service import ToastNotifier
from pdfsnap.storage.local import LocalStorage
from pdfsnap.storage.registry import DownloadRegistry, count_pages
from pdfsnap.utils.file_utils import derive_pdf_name
from pdfsnap.utils.image_utils import decode_data_url, to_data_url
from pdfsnap.utils.pdf_preview import render_page_preview

NO_FILE_MESSAGE = "⚠️ Please select an image first!"
BUSY_MESSAGE = "⏳ A conversion is already running"
SUCCESS_MESSAGE = "✅ PDF created successfully!"
FAILURE_MESSAGE = "❌ Could not convert this image"


class ConversionError(RuntimeError):
    """The staged image could not be read, decoded or rendered."""


@dataclass
class RenderedPage:
    data: bytes
    page_width: float
    page_height: float
    page_count: int
    preview: str


def build_image_pdf(image: Image.Image, page_width: float = A4[0]) -> Tuple[bytes, float, float]:
    """Draw ``image`` on a single page of ``page_width``, keeping its aspect ratio."""
    image_width, image_height = image.size
    if not image_width or not image_height:
        raise ValueError("image has no pixels")

    page_height = image_height * page_width / image_width

    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=(page_width, page_height))
    c.drawImage(ImageReader(image), 0, 0, width=page_width, height=page_height)
    c.showPage()
    c.save()
    return buffer.getvalue(), page_width, page_height


class ConversionOrchestrator:
    """Turns the staged image into a downloadable one-page PDF."""

    def __init__(
        self,
        workspace: Workspace,
        notifier: ToastNotifier,
        storage: LocalStorage,
        downloads: DownloadRegistry,
        page_width: float = A4[0],
        delay: float = 0.8,
    ) -> None:
        self.workspace = workspace
        self.notifier = notifier
        self.storage = storage
        self.downloads = downloads
        self.page_width = page_width
        self.delay = delay
        self.logger = configure_logging()

    # ------------------------------------------------------------------
    async def convert(self) -> Optional[ConversionResult]:
        if self.workspace.busy:
            self.notifier.notify(BUSY_MESSAGE, Severity.warning)
            return None

        if not self.workspace.selected:
            self.notifier.notify(NO_FILE_MESSAGE, Severity.warning)
            return None

        self.workspace.busy = True
        image = self.workspace.reset()
        try:
            result = await self._run(image)
        except Exception as exc:
            self.logger.exception("Conversion of %s failed", image.name)
            self.notifier.notify(FAILURE_MESSAGE, Severity.error)
            raise ConversionError(f"could not convert {image.name}") from exc
        finally:
            self.workspace.busy = False
            self.storage.cleanup([image.path])

        self.notifier.notify(SUCCESS_MESSAGE, Severity.success)
        self.logger.info("Converted %s to %s", image.name, result.filename)
        return result

    # ------------------------------------------------------------------
    async def _run(self, image: SelectedImage) -> ConversionResult:
        if self.delay:
            await asyncio.sleep(self.delay)

        data_url = await self._read_data_url(image)
        bitmap = await asyncio.to_thread(decode_data_url, data_url)
        rendered = await asyncio.to_thread(self._render, bitmap)

        # Registry bookkeeping stays on the event loop.
        document = self.downloads.register(rendered.data, derive_pdf_name(image.name), page_count=rendered.page_count)

        return ConversionResult(
            filename=document.filename,
            source_filename=image.name,
            page_width=rendered.page_width,
            page_height=rendered.page_height,
            image_width=bitmap.width,
            image_height=bitmap.height,
            page_count=document.page_count,
            size_bytes=document.size_bytes,
            download_url=document.download_url,
            preview=rendered.preview,
        )

    def _render(self, bitmap: Image.Image) -> RenderedPage:
        """Build the page, count it and rasterise a preview; runs in a worker thread."""
        data, page_width, page_height = build_image_pdf(bitmap, self.page_width)
        return RenderedPage(
            data=data,
            page_width=page_width,
            page_height=page_height,
            page_count=count_pages(data),
            preview=render_page_preview(data, 1),
        )

    @staticmethod
    async def _read_data_url(image: SelectedImage) -> str:
        data = await asyncio.to_thread(image.path.read_bytes)
        return to_data_url(data, image.media_type)
