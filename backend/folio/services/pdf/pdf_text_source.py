import io
import logging
from typing import List, Tuple

import pdfplumber
from PyPDF2 import PdfReader

from ...errors import DocumentLoadFailed, PageUnreadable
from ...models.content import PDFDocumentInfo
from ...models.text_runs import TextRun

logger = logging.getLogger(__name__)


class PDFTextSource:
    """
    Reads page counts and positioned text runs from PDF bytes.

    pdfplumber is tried first; PyPDF2 is used as a fallback when pdfplumber
    cannot open or read the document. The bytes are re-opened on every call.
    Runs are returned in bottom-up page coordinates together with the page
    height, ready for ``PDFTextReconstructor``.
    """

    def document_info(self, data: bytes) -> PDFDocumentInfo:
        """
        Raises:
            DocumentLoadFailed: If neither reader can open the document
        """
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                info = pdf.metadata or {}
                return PDFDocumentInfo(
                    total_pages=len(pdf.pages),
                    title=self._clean_info_value(info.get("Title")),
                    author=self._clean_info_value(info.get("Author")),
                )
        except Exception as e:
            logger.warning(f"pdfplumber could not open document, trying PyPDF2: {e}")
            try:
                reader = PdfReader(io.BytesIO(data))
                info = reader.metadata
                return PDFDocumentInfo(
                    total_pages=len(reader.pages),
                    title=self._clean_info_value(info.title if info else None),
                    author=self._clean_info_value(info.author if info else None),
                )
            except Exception as fallback_error:
                raise DocumentLoadFailed(
                    f"Failed to load PDF document with both pdfplumber and PyPDF2: "
                    f"{str(e)}, {str(fallback_error)}"
                ) from fallback_error

    def read_page(self, data: bytes, page_num: int) -> Tuple[List[TextRun], float]:
        """
        Return the text runs of a 1-based page and the page height

        Raises:
            PageUnreadable: If neither reader can extract the page
        """
        try:
            return self._read_page_pdfplumber(data, page_num)
        except Exception as e:
            logger.warning(f"pdfplumber failed on page {page_num}, trying PyPDF2: {e}")
            try:
                return self._read_page_pypdf2(data, page_num)
            except Exception as fallback_error:
                raise PageUnreadable(
                    f"Failed to extract page {page_num} with both pdfplumber and "
                    f"PyPDF2: {str(e)}, {str(fallback_error)}"
                ) from fallback_error

    def _read_page_pdfplumber(
        self, data: bytes, page_num: int
    ) -> Tuple[List[TextRun], float]:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            # pdfplumber uses 0-based indexing
            page = pdf.pages[page_num - 1]
            height = float(page.height)

            runs = []
            # keep_blank_chars keeps the spaces inside a run, since runs are
            # later joined without a separator
            for word in page.extract_words(keep_blank_chars=True):
                top, bottom = float(word["top"]), float(word["bottom"])
                x0, x1 = float(word["x0"]), float(word["x1"])
                runs.append(
                    TextRun.at(
                        word["text"],
                        x=x0,
                        y=height - bottom,
                        width=x1 - x0,
                        height=bottom - top,
                    )
                )
            return runs, height

    def _read_page_pypdf2(self, data: bytes, page_num: int) -> Tuple[List[TextRun], float]:
        reader = PdfReader(io.BytesIO(data))
        page = reader.pages[page_num - 1]
        runs: List[TextRun] = []

        def visitor(text, cm, tm, font_dict, font_size):
            text = text.replace("\n", "")
            if not text:
                return
            # Text matrix origin mapped through the current transformation matrix
            x = tm[4] * cm[0] + tm[5] * cm[2] + cm[4]
            y = tm[4] * cm[1] + tm[5] * cm[3] + cm[5]
            runs.append(TextRun.at(text, x=x, y=y, height=float(font_size or 0)))

        page.extract_text(visitor_text=visitor)
        return runs, float(page.mediabox.height)

    def _clean_info_value(self, value) -> str | None:
        if value is None:
            return None
        value = str(value).strip()
        return value or None
