from typing import List

from bs4 import BeautifulSoup

from ...models.content import EPUBBookMetadata


class EPUBMetadataExtractor:
    def _extract_metadata_values(self, soup: BeautifulSoup, field: str) -> List[str]:
        """
        Collect the non-empty text of every dc:<field> element
        """
        values = []
        for element in soup.find_all(f"dc:{field}"):
            value = element.get_text(strip=True)
            if value:
                values.append(value)
        return values

    def extract(self, manifest_xml: str | None) -> EPUBBookMetadata:
        """
        Read title, author and language from the package document.

        Multiple creators are joined with "; ". Missing fields stay None.
        """
        if not manifest_xml:
            return EPUBBookMetadata()

        # html.parser keeps namespaced names such as "dc:title" as-is (lowercased)
        soup = BeautifulSoup(manifest_xml, "html.parser")

        titles = self._extract_metadata_values(soup, "title")
        creators = self._extract_metadata_values(soup, "creator")
        languages = self._extract_metadata_values(soup, "language")

        return EPUBBookMetadata(
            title=titles[0] if titles else None,
            author="; ".join(creators) if creators else None,
            language=languages[0] if languages else None,
        )
