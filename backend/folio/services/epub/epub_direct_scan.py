import logging
from typing import List

from ...models.archive import Archive, ManifestEntry
from .epub_container_resolver import RESERVED_METADATA_DIR
from .epub_manifest_parser import media_role_for

logger = logging.getLogger(__name__)


class EPUBDirectScan:
    """
    Best-effort discovery of content files when no usable manifest exists.

    Files are listed in the archive's native enumeration order. That order
    often matches the order the files were added when the book was packed,
    but nothing guarantees it matches the author's reading order, and no
    attempt is made to re-sort it.
    """

    def scan(self, archive: Archive) -> List[ManifestEntry]:
        entries: List[ManifestEntry] = []

        for name in archive.names():
            if name.startswith(RESERVED_METADATA_DIR):
                continue

            role = media_role_for(name)
            if role is None:
                continue

            logger.debug(f"Direct scan found {role.value} file: {name}")
            entries.append(ManifestEntry(path=name, media_role=role))

        logger.info(f"Direct scan found {len(entries)} candidate files")
        return entries
