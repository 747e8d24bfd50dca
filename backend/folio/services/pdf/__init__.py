# PDF Service Components
from .pdf_text_reconstructor import PDFTextReconstructor
from .pdf_text_source import PDFTextSource

__all__ = [
    "PDFTextReconstructor",
    "PDFTextSource",
]
