# EPUB Service Components
from .epub_chapter_assembler import EPUBChapterAssembler
from .epub_container_resolver import EPUBContainerResolver
from .epub_content_processor import EPUBContentProcessor
from .epub_direct_scan import EPUBDirectScan
from .epub_manifest_parser import EPUBManifestParser
from .epub_metadata_extractor import EPUBMetadataExtractor
from .epub_style_processor import EPUBStyleProcessor

__all__ = [
    "EPUBContainerResolver",
    "EPUBManifestParser",
    "EPUBDirectScan",
    "EPUBContentProcessor",
    "EPUBChapterAssembler",
    "EPUBMetadataExtractor",
    "EPUBStyleProcessor",
]
