from enum import Enum

from pydantic import BaseModel, Field, computed_field

# ============================================
# EPUB content
# ============================================


class ChapterSource(str, Enum):
    """How the chapter list was discovered"""

    MANIFEST = "manifest"
    DIRECT_SCAN = "direct_scan"


class Chapter(BaseModel):
    """One readable content file, in reading order"""

    id: str  # "chapter-{ordinal}"
    ordinal: int  # 1-based, contiguous over surviving chapters
    title: str
    content: str  # Sanitized markup, body contents only
    source_path: str  # Archive entry the chapter was read from


class Stylesheet(BaseModel):
    """Sanitized CSS for the display layer to apply"""

    path: str
    content: str


class EPUBBookMetadata(BaseModel):
    """Descriptive metadata read from the package document, when available"""

    title: str | None = None
    author: str | None = None
    language: str | None = None


class EPUBExtractionResult(BaseModel):
    """Everything produced by a single EPUB extraction call"""

    chapters: list[Chapter]
    stylesheets: list[Stylesheet] = Field(default_factory=list)
    metadata: EPUBBookMetadata = Field(default_factory=EPUBBookMetadata)
    source: ChapterSource = ChapterSource.MANIFEST

    @computed_field  # type: ignore[misc]
    @property
    def total_chapters(self) -> int:
        return len(self.chapters)


# ============================================
# PDF content
# ============================================


class Page(BaseModel):
    """Reconstructed markup for one PDF page"""

    page_number: int  # 1-based
    content: str
    total_pages: int


class PDFDocumentInfo(BaseModel):
    """Page count and document info dictionary values"""

    total_pages: int
    title: str | None = None
    author: str | None = None
