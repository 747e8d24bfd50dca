import asyncio
import logging
from typing import List

from ..config import LINE_THRESHOLD
from ..errors import PageOutOfRange, PageUnreadable
from ..models.content import Page, PDFDocumentInfo
from .pdf import PDFTextReconstructor, PDFTextSource

logger = logging.getLogger(__name__)


class PDFService:
    """
    Produces reading-order markup for PDF pages on demand.

    Stateless between calls: every request re-opens the document from the
    bytes it is given.
    """

    def __init__(self, line_threshold: float = LINE_THRESHOLD) -> None:
        self.text_source = PDFTextSource()
        self.reconstructor = PDFTextReconstructor(line_threshold)

    def get_document_info(self, data: bytes) -> PDFDocumentInfo:
        """
        Get the page count and document info of a PDF

        Raises:
            DocumentLoadFailed: If the bytes cannot be opened as a PDF
        """
        return self.text_source.document_info(data)

    def render_page(self, data: bytes, page_num: int) -> Page:
        """
        Reconstruct the markup of a specific page of the PDF

        Raises:
            DocumentLoadFailed: If the bytes cannot be opened as a PDF
            PageOutOfRange: If page_num is outside 1..total_pages
            PageUnreadable: If the page's text cannot be read
        """
        total_pages = self.get_document_info(data).total_pages
        return self._render_page(data, page_num, total_pages)

    def render_all_pages(self, data: bytes) -> List[Page]:
        """
        Reconstruct every page, skipping pages that cannot be read
        """
        total_pages = self.get_document_info(data).total_pages
        pages = []
        for page_num in range(1, total_pages + 1):
            try:
                pages.append(self._render_page(data, page_num, total_pages))
            except PageUnreadable as e:
                logger.warning(f"Skipping unreadable page {page_num}: {e}")
        logger.info(f"Rendered {len(pages)} of {total_pages} pages")
        return pages

    def _render_page(self, data: bytes, page_num: int, total_pages: int) -> Page:
        if page_num < 1 or page_num > total_pages:
            raise PageOutOfRange(page_num, total_pages)

        runs, page_height = self.text_source.read_page(data, page_num)
        content = self.reconstructor.reconstruct(runs, page_height)
        logger.debug(f"Page {page_num}: {len(runs)} text runs")

        return Page(page_number=page_num, content=content, total_pages=total_pages)

    async def get_document_info_async(self, data: bytes) -> PDFDocumentInfo:
        return await asyncio.to_thread(self.get_document_info, data)

    async def render_page_async(self, data: bytes, page_num: int) -> Page:
        # Run the CPU-bound parsing in a thread pool to avoid blocking the event loop
        return await asyncio.to_thread(self.render_page, data, page_num)
