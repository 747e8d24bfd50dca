"""
Book Record Service Module

Builds and updates the bookshelf records (Book, Bookmark, ReadingProgress)
that the external key-value store persists. Every operation returns an
updated copy and leaves its input untouched; reading and writing the store
is the caller's job.
"""

import logging
import uuid
from datetime import datetime
from pathlib import PurePath
from typing import Callable, Optional

from ..models.book import Book, BookFormat, Bookmark, ReadingProgress
from .progress import clamp_position

# Configure logger for this module
logger = logging.getLogger(__name__)


class BookRecordService:
    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """
        Args:
            clock: Source of the current time, replaceable in tests
        """
        self._clock = clock

    def get_current_timestamp(self) -> str:
        """Current time as an ISO format string"""
        return self._clock().isoformat(timespec="seconds")

    def create_book(
        self, source_path: str, title: Optional[str] = None, author: Optional[str] = None
    ) -> Book:
        """
        Create a new bookshelf record for a file.

        The format is detected from the file suffix. When no title is given
        the file name without its suffix is used.

        Raises:
            ValueError: If the file is neither an EPUB nor a PDF
        """
        book_format = BookFormat.from_filename(source_path)
        now = self.get_current_timestamp()
        return Book(
            id=str(uuid.uuid4()),
            title=(title or "").strip() or PurePath(source_path).stem,
            author=author,
            source_path=source_path,
            format=book_format,
            last_opened=now,
            added_date=now,
        )

    def add_bookmark(
        self,
        book: Book,
        position: int,
        title: str,
        description: Optional[str] = None,
    ) -> Book:
        """
        Add a bookmark at a page (PDF) or chapter ordinal (EPUB).

        Bookmark ids are unique within the book.

        Raises:
            ValueError: If the title is blank
        """
        if not title or not title.strip():
            raise ValueError("Bookmark title is required")

        existing_ids = {bookmark.id for bookmark in book.bookmarks}
        bookmark_id = str(uuid.uuid4())
        while bookmark_id in existing_ids:
            bookmark_id = str(uuid.uuid4())

        bookmark = Bookmark(
            id=bookmark_id,
            position=position,
            title=title.strip(),
            description=(description or "").strip() or None,
            created_at=self.get_current_timestamp(),
        )
        logger.info(f"Added bookmark at position {position} to {book.source_path}")
        return book.model_copy(update={"bookmarks": [*book.bookmarks, bookmark]})

    def remove_bookmark(self, book: Book, bookmark_id: str) -> Book:
        """
        Remove a bookmark by id.

        Raises:
            KeyError: If the book has no bookmark with that id
        """
        remaining = [b for b in book.bookmarks if b.id != bookmark_id]
        if len(remaining) == len(book.bookmarks):
            raise KeyError(f"Bookmark {bookmark_id} not found")
        return book.model_copy(update={"bookmarks": remaining})

    def update_progress(self, book: Book, current_position: int, total_positions: int) -> Book:
        """
        Record the reading position, clamped into ``[1, total_positions]``,
        and mark the book as just opened.
        """
        progress = ReadingProgress(
            current_position=clamp_position(current_position, total_positions),
            total_positions=max(total_positions, 0),
        )
        logger.debug(
            f"Progress for {book.source_path}: {progress.current_position}/"
            f"{progress.total_positions} ({progress.percentage}%)"
        )
        return book.model_copy(
            update={"progress": progress, "last_opened": self.get_current_timestamp()}
        )
