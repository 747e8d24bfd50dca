"""
In-memory view of an EPUB archive.

An Archive is loaded once per extraction request and never shared between
requests. Entries keep the ZIP's native enumeration order.
"""

import io
import logging
import zipfile
import zlib
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

from ..errors import ArchiveUnreadable

logger = logging.getLogger(__name__)


class MediaRole(str, Enum):
    """What a manifest entry is used for"""

    CONTENT = "content"
    STYLE = "style"


@dataclass(frozen=True)
class ManifestEntry:
    """A content or style file declared by the manifest (or found by scanning)"""

    path: str
    media_role: MediaRole


class Archive:
    """
    Immutable index of entry name -> raw bytes.

    Directory entries are skipped. Lookups are exact, case-sensitive matches
    on the entry name as stored in the ZIP central directory.
    """

    def __init__(self, entries: Mapping[str, bytes]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Archive":
        """
        Decode a ZIP byte buffer into an Archive.

        Entries that fail to decompress are logged and left out, so reading
        them later returns None.

        Raises:
            ArchiveUnreadable: If the buffer is not a valid ZIP file
        """
        try:
            zf = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
            raise ArchiveUnreadable(f"Not a readable EPUB archive: {e}") from e

        entries = {}
        with zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                try:
                    entries[info.filename] = zf.read(info)
                except (zipfile.BadZipFile, NotImplementedError, zlib.error, OSError) as e:
                    logger.warning(f"Skipping unreadable archive entry {info.filename}: {e}")

        logger.debug(f"Archive loaded with {len(entries)} entries")
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def names(self) -> Iterator[str]:
        """Entry names in the archive's native order"""
        return iter(self._entries)

    def has(self, name: str) -> bool:
        return name in self._entries

    def read_bytes(self, name: str) -> bytes | None:
        return self._entries.get(name)

    def read_text(self, name: str) -> str | None:
        """
        Return the entry decoded as UTF-8, or None if the entry is absent.

        Undecodable bytes are replaced rather than raising, so one badly
        encoded file cannot abort the whole extraction.
        """
        raw = self._entries.get(name)
        if raw is None:
            return None
        return raw.decode("utf-8", errors="replace")
