import logging
import re

from ...errors import ContainerMalformed, ContainerMissing
from ...models.archive import Archive

logger = logging.getLogger(__name__)

CONTAINER_PATH = "META-INF/container.xml"
RESERVED_METADATA_DIR = "META-INF/"

_ROOTFILE_PATTERN = re.compile(
    r"""<rootfile\b[^>]*\bfull-path\s*=\s*["']([^"']*)["'][^>]*>""",
    re.IGNORECASE,
)


class EPUBContainerResolver:
    def resolve(self, archive: Archive) -> str:
        """
        Return the archive path of the package document (the .opf manifest)

        Raises:
            ContainerMissing: If META-INF/container.xml is not in the archive
            ContainerMalformed: If the container declares no rootfile full-path
        """
        container_xml = archive.read_text(CONTAINER_PATH)
        if container_xml is None:
            raise ContainerMissing(f"{CONTAINER_PATH} not found in archive")

        match = _ROOTFILE_PATTERN.search(container_xml)
        if not match or not match.group(1).strip():
            raise ContainerMalformed(f"No rootfile full-path declared in {CONTAINER_PATH}")

        manifest_path = match.group(1).strip()
        logger.debug(f"Container declares manifest at {manifest_path}")
        return manifest_path
