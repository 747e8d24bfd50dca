"""
Shared fixtures: synthetic EPUB archives and minimal PDFs built in memory.
"""

import io
import zipfile
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="{opf_path}" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""


def build_zip(files: Dict[str, str | bytes], compression: int = zipfile.ZIP_DEFLATED) -> bytes:
    """Pack files into a ZIP, in the given order"""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression) as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buffer.getvalue()


def build_opf(
    items: Sequence[Tuple[str, str]],
    title: Optional[str] = "Test Book",
    creators: Sequence[str] = ("Test Author",),
    language: Optional[str] = "en",
) -> str:
    """Package document declaring (href, media-type) items in order"""
    metadata = []
    if title is not None:
        metadata.append(f"<dc:title>{title}</dc:title>")
    metadata.extend(f"<dc:creator>{creator}</dc:creator>" for creator in creators)
    if language is not None:
        metadata.append(f"<dc:language>{language}</dc:language>")

    manifest = "\n".join(
        f'    <item id="item{i}" href="{href}" media-type="{media_type}"/>'
        for i, (href, media_type) in enumerate(items, start=1)
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    {"".join(metadata)}
  </metadata>
  <manifest>
{manifest}
  </manifest>
</package>
"""


def chapter_html(heading: str, paragraph: str, title: Optional[str] = None) -> str:
    head_title = f"<title>{title}</title>" if title else ""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml">
<head>{head_title}<link rel="stylesheet" href="style.css"/></head>
<body>
<h1>{heading}</h1>
<p>{paragraph}</p>
</body>
</html>
"""


def build_epub(
    chapters: Sequence[Tuple[str, str]],
    opf_dir: str = "OEBPS",
    stylesheets: Sequence[Tuple[str, str]] = (),
    zip_order: Optional[Sequence[str]] = None,
    **opf_kwargs,
) -> bytes:
    """
    Build an EPUB whose manifest declares ``chapters`` (href, html) in order.

    ``zip_order`` optionally lists hrefs in the order they are written to
    the archive, to decouple archive order from manifest order.
    """
    prefix = f"{opf_dir}/" if opf_dir else ""
    items = [(href, "application/xhtml+xml") for href, _ in chapters]
    items += [(href, "text/css") for href, _ in stylesheets]

    content = dict(chapters) | dict(stylesheets)
    order = list(zip_order) if zip_order else list(content)

    files: Dict[str, str | bytes] = {
        "mimetype": "application/epub+zip",
        "META-INF/container.xml": CONTAINER_XML.format(opf_path=f"{prefix}content.opf"),
        f"{prefix}content.opf": build_opf(items, **opf_kwargs),
    }
    for href in order:
        files[f"{prefix}{href}"] = content[href]
    return build_zip(files)


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(
    pages: List[List[Tuple[float, float, str]]],
    width: float = 612,
    height: float = 792,
    title: Optional[str] = None,
) -> bytes:
    """
    Assemble a minimal PDF with Helvetica text.

    Each page is a list of (x, y, text) runs drawn in the given order, with y
    measured upwards from the bottom of the page.
    """
    objects: List[bytes] = []

    def add(body: bytes) -> int:
        objects.append(body)
        return len(objects)

    catalog_id = add(b"")  # filled in once the page tree id is known
    pages_id = add(b"")
    font_id = add(
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica "
        b"/Encoding /WinAnsiEncoding >>"
    )

    page_ids = []
    for runs in pages:
        stream = "".join(
            f"BT /F1 12 Tf {x} {y} Td ({_pdf_escape(text)}) Tj ET\n" for x, y, text in runs
        ).encode("latin-1")
        content_id = add(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"endstream"
        )
        page_ids.append(
            add(
                (
                    f"<< /Type /Page /Parent {pages_id} 0 R "
                    f"/MediaBox [0 0 {width} {height}] "
                    f"/Resources << /Font << /F1 {font_id} 0 R >> >> "
                    f"/Contents {content_id} 0 R >>"
                ).encode("latin-1")
            )
        )

    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)
    objects[pages_id - 1] = f"<< /Type /Pages /Kids [{kids}] /Count {len(page_ids)} >>".encode(
        "latin-1"
    )
    objects[catalog_id - 1] = f"<< /Type /Catalog /Pages {pages_id} 0 R >>".encode("latin-1")

    info_id = None
    if title is not None:
        info_id = add(f"<< /Title ({_pdf_escape(title)}) >>".encode("latin-1"))

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset

    trailer = f"<< /Size {len(objects) + 1} /Root {catalog_id} 0 R"
    if info_id is not None:
        trailer += f" /Info {info_id} 0 R"
    trailer += " >>"
    out += b"trailer\n" + trailer.encode("latin-1") + b"\nstartxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
def two_chapter_epub():
    """Manifest declares chap1 then chap2, each with an <h1> and a paragraph"""
    return build_epub(
        [
            ("chap1.xhtml", chapter_html("The Beginning", "It was a dark night.")),
            ("chap2.xhtml", chapter_html("The End", "And then it was morning.")),
        ],
        stylesheets=[("style.css", "body { margin: 0; }")],
    )


@pytest.fixture
def two_page_pdf():
    """Page 1 draws its lower line first; page 2 has a single line"""
    return build_pdf(
        [
            [(72, 680, "Second line"), (72, 700, "First line")],
            [(72, 700, "Another page")],
        ],
        title="Sample PDF",
    )
