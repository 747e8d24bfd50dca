from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, Field, computed_field

from ..services.progress import progress_percentage

# ============================================
# Enums
# ============================================


class BookFormat(str, Enum):
    """Supported source formats"""

    EPUB = "epub"
    PDF = "pdf"

    @classmethod
    def from_filename(cls, filename: str) -> "BookFormat":
        """Detect the format from a file name's suffix"""
        suffix = PurePath(filename).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            raise ValueError(
                f"Unsupported file format: '{suffix}'. Supported: epub, pdf"
            ) from None


# ============================================
# Persistence Boundary Models
# ============================================


class ReadingProgress(BaseModel):
    """Reading position within a book"""

    current_position: int = 0
    total_positions: int = 0

    @computed_field  # type: ignore[misc]
    @property
    def percentage(self) -> int:
        """Calculate progress percentage"""
        return progress_percentage(self.current_position, self.total_positions)


class Bookmark(BaseModel):
    """A saved position (page or chapter ordinal) with user notes"""

    id: str
    position: int
    title: str
    description: str | None = None
    created_at: str  # ISO format timestamp


class Book(BaseModel):
    """
    Bookshelf record, keyed by source path.

    Read and written wholesale by the external key-value store. Timestamps are
    ISO format strings so the record serializes to JSON without custom
    encoders.
    """

    id: str
    title: str
    author: str | None = None
    source_path: str
    format: BookFormat
    last_opened: str | None = None
    bookmarks: list[Bookmark] = Field(default_factory=list)
    progress: ReadingProgress = Field(default_factory=ReadingProgress)
    added_date: str
