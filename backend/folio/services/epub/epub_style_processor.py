import logging
import re
from typing import Iterable, List

from ...models.archive import Archive
from ...models.content import Stylesheet

logger = logging.getLogger(__name__)


class EPUBStyleProcessor:
    def collect_stylesheets(self, archive: Archive, paths: Iterable[str]) -> List[Stylesheet]:
        """
        Read and sanitize the given CSS files from the archive.

        Stylesheets are returned in the order given, each path at most once.
        Applying them is left to the display layer.
        """
        styles: List[Stylesheet] = []
        seen = set()

        for path in paths:
            if path in seen:
                continue
            seen.add(path)

            css_content = archive.read_text(path)
            if css_content is None:
                # Skip problematic CSS files
                logger.warning(f"Stylesheet {path} declared but not found in archive")
                continue

            styles.append(Stylesheet(path=path, content=self._sanitize_css(css_content)))

        logger.debug(f"Collected {len(styles)} stylesheets")
        return styles

    def _sanitize_css(self, css_content: str) -> str:
        """
        Sanitize CSS content to remove potentially harmful elements
        """
        # Remove @import statements to prevent loading external resources
        css_content = re.sub(r"@import\s+[^;]+;", "", css_content, flags=re.IGNORECASE)

        # Remove url() functions that could load external resources
        css_content = re.sub(
            r'url\s*\(\s*[\'"]?[^\'")]*[\'"]?\s*\)',
            "url(about:blank)",
            css_content,
            flags=re.IGNORECASE,
        )

        # Remove javascript: protocols
        css_content = re.sub(r"javascript\s*:", "", css_content, flags=re.IGNORECASE)

        # Remove expression() functions (IE-specific but potentially harmful)
        css_content = re.sub(
            r"expression\s*\([^)]*\)", "", css_content, flags=re.IGNORECASE
        )

        return css_content
