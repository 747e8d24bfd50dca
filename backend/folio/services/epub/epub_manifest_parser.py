import logging
import posixpath
import re
from typing import List
from urllib.parse import unquote

from ...errors import ManifestUnreadable
from ...models.archive import Archive, ManifestEntry, MediaRole

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".html", ".xhtml")
STYLE_SUFFIXES = (".css",)

_ITEM_PATTERN = re.compile(r"<item\b[^>]*>", re.IGNORECASE)
_HREF_PATTERN = re.compile(r"""\bhref\s*=\s*["']([^"']*)["']""", re.IGNORECASE)


def resolve_href(base_dir: str, href: str) -> str:
    """
    Turn a manifest-relative href into an archive entry name.

    Percent-escapes are decoded and ``.``/``..`` segments collapsed, since ZIP
    entry names are stored unescaped and normalized.
    """
    href = unquote(href.split("#", 1)[0])
    return posixpath.normpath(posixpath.join(base_dir, href)).lstrip("/")


def media_role_for(path: str) -> MediaRole | None:
    lowered = path.lower()
    if lowered.endswith(CONTENT_SUFFIXES):
        return MediaRole.CONTENT
    if lowered.endswith(STYLE_SUFFIXES):
        return MediaRole.STYLE
    return None


class EPUBManifestParser:
    def parse(self, archive: Archive, manifest_path: str) -> List[ManifestEntry]:
        """
        Read the package document and list its content and style items.

        Entries are returned in declaration order, which is taken as the
        book's reading order and never re-sorted. Paths are relative to the
        archive root (the manifest's own directory is the base for every
        declared href). An empty result is valid and means the caller should
        fall back to scanning the archive directly.

        Raises:
            ManifestUnreadable: If the manifest is not in the archive
        """
        manifest_xml = archive.read_text(manifest_path)
        if manifest_xml is None:
            raise ManifestUnreadable(f"Manifest {manifest_path} not found in archive")

        base_dir = posixpath.dirname(manifest_path)
        entries: List[ManifestEntry] = []
        seen = set()

        for item_tag in _ITEM_PATTERN.findall(manifest_xml):
            href_match = _HREF_PATTERN.search(item_tag)
            if not href_match:
                continue

            role = media_role_for(href_match.group(1))
            if role is None:
                continue

            path = resolve_href(base_dir, href_match.group(1))
            if path in seen:
                continue
            seen.add(path)

            logger.debug(f"Manifest declares {role.value} file: {path}")
            entries.append(ManifestEntry(path=path, media_role=role))

        content_count = sum(1 for e in entries if e.media_role is MediaRole.CONTENT)
        logger.info(
            f"Manifest {manifest_path}: {content_count} content files, "
            f"{len(entries) - content_count} stylesheets"
        )
        return entries
