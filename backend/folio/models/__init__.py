from .archive import Archive, ManifestEntry, MediaRole
from .book import Book, BookFormat, Bookmark, ReadingProgress
from .content import (
    Chapter,
    ChapterSource,
    EPUBBookMetadata,
    EPUBExtractionResult,
    Page,
    PDFDocumentInfo,
    Stylesheet,
)
from .text_runs import Extent, Line, Point, TextRun

__all__ = [
    "Archive",
    "ManifestEntry",
    "MediaRole",
    "Book",
    "BookFormat",
    "Bookmark",
    "ReadingProgress",
    "Chapter",
    "ChapterSource",
    "EPUBBookMetadata",
    "EPUBExtractionResult",
    "Page",
    "PDFDocumentInfo",
    "Stylesheet",
    "Extent",
    "Line",
    "Point",
    "TextRun",
]
