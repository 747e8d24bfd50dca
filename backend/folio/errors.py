"""
Extraction error taxonomy.

Archive-side errors (ContainerMissing, ContainerMalformed, ManifestUnreadable)
are recovered inside the EPUB pipeline by falling back to a direct scan of the
archive. Only NoReadableContent and DocumentLoadFailed are meant to reach the
caller as user-visible failures. PageUnreadable is raised per page by the PDF
pipeline.
"""


class ExtractionError(Exception):
    """Base class for every document extraction failure"""


# ============================================
# Archive pipeline
# ============================================


class ContainerMissing(ExtractionError):
    """The archive has no META-INF/container.xml entry"""


class ContainerMalformed(ExtractionError):
    """The container descriptor declares no rootfile full-path"""


class ManifestUnreadable(ExtractionError):
    """The manifest named by the container is not present in the archive"""


class NoReadableContent(ExtractionError):
    """Neither the manifest nor the direct scan produced a usable chapter"""


# ============================================
# Document loading
# ============================================


class DocumentLoadFailed(ExtractionError):
    """The source bytes could not be opened as a document"""


class ArchiveUnreadable(DocumentLoadFailed):
    """The source bytes are not a readable ZIP archive"""


# ============================================
# Page pipeline
# ============================================


class PageUnreadable(ExtractionError):
    """Text runs could not be read for a page"""


class PageOutOfRange(PageUnreadable, ValueError):
    """The requested page number is outside 1..total_pages"""

    def __init__(self, page_number: int, total_pages: int):
        self.page_number = page_number
        self.total_pages = total_pages
        super().__init__(
            f"Page {page_number} is out of range. Document has {total_pages} pages."
        )
