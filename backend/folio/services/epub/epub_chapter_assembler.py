import logging
from typing import Iterable, List

from ...models.archive import Archive
from ...models.content import Chapter
from .epub_content_processor import EPUBContentProcessor

logger = logging.getLogger(__name__)


class EPUBChapterAssembler:
    def __init__(self, content_processor: EPUBContentProcessor | None = None):
        self.content_processor = content_processor or EPUBContentProcessor()

    def assemble(self, archive: Archive, content_paths: Iterable[str]) -> List[Chapter]:
        """
        Build the chapter sequence for the given content files, in order.

        Files missing from the archive are logged and skipped. Files whose
        sanitized body is empty are dropped silently. Ordinals are assigned
        sequentially over the surviving chapters, so they are always
        contiguous from 1 and identical across repeated extractions of the
        same bytes. An empty list means no readable content was found.
        """
        chapters: List[Chapter] = []

        for path in content_paths:
            raw_content = archive.read_text(path)
            if raw_content is None:
                logger.warning(f"Could not read content file {path}, skipping")
                continue

            content = self.content_processor.sanitize_html(raw_content)
            if not content:
                logger.debug(f"Content file {path} is empty after sanitizing, dropped")
                continue

            ordinal = len(chapters) + 1
            chapters.append(
                Chapter(
                    id=f"chapter-{ordinal}",
                    ordinal=ordinal,
                    title=self.content_processor.derive_title(raw_content, ordinal),
                    content=content,
                    source_path=path,
                )
            )

        return chapters
