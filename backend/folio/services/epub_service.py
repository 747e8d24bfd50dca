import asyncio
import logging
from typing import List

from ..config import TITLE_MAX_LENGTH
from ..errors import (
    ContainerMalformed,
    ContainerMissing,
    ManifestUnreadable,
    NoReadableContent,
)
from ..models.archive import Archive, ManifestEntry, MediaRole
from ..models.content import (
    Chapter,
    ChapterSource,
    EPUBBookMetadata,
    EPUBExtractionResult,
)
from .epub import (
    EPUBChapterAssembler,
    EPUBContainerResolver,
    EPUBContentProcessor,
    EPUBDirectScan,
    EPUBManifestParser,
    EPUBMetadataExtractor,
    EPUBStyleProcessor,
)

logger = logging.getLogger(__name__)


def _paths(entries: List[ManifestEntry], role: MediaRole) -> List[str]:
    return [entry.path for entry in entries if entry.media_role is role]


class EPUBService:
    """
    Turns EPUB archive bytes into an ordered chapter list.

    The container descriptor and manifest are tried first. When either is
    missing or unusable, or when none of the declared files yields readable
    content, the archive is scanned directly instead. Each call owns its
    Archive; nothing is cached between calls.
    """

    def __init__(self, title_max_length: int = TITLE_MAX_LENGTH):
        # Initialize component services
        self.container_resolver = EPUBContainerResolver()
        self.manifest_parser = EPUBManifestParser()
        self.direct_scan = EPUBDirectScan()
        self.content_processor = EPUBContentProcessor(title_max_length)
        self.chapter_assembler = EPUBChapterAssembler(self.content_processor)
        self.metadata_extractor = EPUBMetadataExtractor()
        self.style_processor = EPUBStyleProcessor()

    def extract(self, data: bytes) -> EPUBExtractionResult:
        """
        Extract chapters, stylesheets and metadata from EPUB bytes

        Raises:
            ArchiveUnreadable: If the bytes are not a ZIP archive
            NoReadableContent: If neither the manifest nor a direct scan
                produced a chapter
        """
        archive = Archive.from_bytes(data)

        chapters: List[Chapter] = []
        stylesheet_paths: List[str] = []
        metadata = EPUBBookMetadata()
        source = ChapterSource.MANIFEST

        try:
            manifest_path = self.container_resolver.resolve(archive)
            entries = self.manifest_parser.parse(archive, manifest_path)
            metadata = self.metadata_extractor.extract(archive.read_text(manifest_path))
            stylesheet_paths.extend(_paths(entries, MediaRole.STYLE))
            chapters = self.chapter_assembler.assemble(
                archive, _paths(entries, MediaRole.CONTENT)
            )
        except (ContainerMissing, ContainerMalformed, ManifestUnreadable) as e:
            logger.info(f"Manifest unavailable ({e}), falling back to direct scan")

        if not chapters:
            logger.info("No chapters found through the manifest, trying direct scan")
            source = ChapterSource.DIRECT_SCAN
            entries = self.direct_scan.scan(archive)
            stylesheet_paths.extend(_paths(entries, MediaRole.STYLE))
            chapters = self.chapter_assembler.assemble(
                archive, _paths(entries, MediaRole.CONTENT)
            )

        if not chapters:
            raise NoReadableContent("No readable chapters found in EPUB")

        stylesheets = self.style_processor.collect_stylesheets(archive, stylesheet_paths)

        logger.info(
            f"Extracted {len(chapters)} chapters and {len(stylesheets)} stylesheets "
            f"via {source.value}"
        )
        return EPUBExtractionResult(
            chapters=chapters,
            stylesheets=stylesheets,
            metadata=metadata,
            source=source,
        )

    async def extract_async(self, data: bytes) -> EPUBExtractionResult:
        """Run ``extract`` in a worker thread so the event loop stays free"""
        return await asyncio.to_thread(self.extract, data)
