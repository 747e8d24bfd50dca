"""
Unit tests for EPUBContentProcessor.

Tests cover:
- Script/style/meta/link removal
- Entity decoding
- Body isolation
- Inline handler and javascript: URL removal
- Title derivation order and fallback
"""

import pytest

from folio.services.epub import EPUBContentProcessor
from folio.services.epub.epub_content_processor import decode_entities


@pytest.fixture
def processor():
    return EPUBContentProcessor()


class TestSanitizeHtml:
    """Test content sanitization"""

    def test_script_removed_and_entities_decoded(self, processor):
        result = processor.sanitize_html("<script>evil()</script><p>Hello &amp; World</p>")

        assert "<p>Hello & World</p>" in result
        assert "<script" not in result
        assert "evil()" not in result

    def test_style_meta_and_link_removed(self, processor):
        html = (
            '<html><head><meta charset="utf-8"/><link rel="stylesheet" href="a.css"/>'
            "<style>p { color: red; }</style></head>"
            "<body><p>Text</p></body></html>"
        )
        assert processor.sanitize_html(html) == "<p>Text</p>"

    def test_body_contents_only(self, processor):
        html = '<html><head><title>T</title></head><BODY class="x">\n<h1>A</h1>\n</BODY></html>'
        assert processor.sanitize_html(html) == "<h1>A</h1>"

    def test_without_body_wrapper_head_and_declarations_dropped(self, processor):
        html = '<?xml version="1.0"?><!DOCTYPE html><html><head><title>T</title></head><div>Hi</div></html>'
        assert processor.sanitize_html(html) == "<div>Hi</div>"

    def test_nested_markup_preserved(self, processor):
        html = '<body><div class="c"><p>One <em>two</em> <a href="#n1">three</a></p></div></body>'
        assert processor.sanitize_html(html) == '<div class="c"><p>One <em>two</em> <a href="#n1">three</a></p></div>'

    def test_all_standard_entities(self, processor):
        result = processor.sanitize_html("<p>&quot;a&quot; &#39;b&#39; &amp; c&nbsp;d</p>")
        assert result == "<p>\"a\" 'b' & c d</p>"

    def test_escaped_entity_not_double_decoded(self):
        assert decode_entities("&amp;lt;") == "&lt;"

    def test_escaped_script_is_stripped_too(self, processor):
        result = processor.sanitize_html("<p>&lt;script&gt;alert(1)&lt;/script&gt;safe</p>")
        assert "<script" not in result
        assert "safe" in result

    def test_escaped_style_prose_is_kept(self, processor):
        result = processor.sanitize_html(
            "<p>Write &lt;style&gt;p { color: red; }&lt;/style&gt; in the head</p>"
        )
        assert "p { color: red; }" in result
        assert "in the head" in result

    def test_live_style_block_removed_before_decoding(self, processor):
        result = processor.sanitize_html("<style>a::after { content: \"&lt;\"; }</style><p>kept</p>")
        assert result == "<p>kept</p>"

    def test_event_handlers_and_javascript_urls_removed(self, processor):
        html = """<body><p onclick="steal()">x</p><a href="javascript:go()">link</a><img src=a.png onerror=bad()></body>"""
        result = processor.sanitize_html(html)

        assert "onclick" not in result
        assert "onerror" not in result
        assert "javascript:" not in result
        assert "<p>x</p>" in result

    def test_text_resembling_handlers_is_kept(self, processor):
        result = processor.sanitize_html("<p>Let one = two</p>")
        assert result == "<p>Let one = two</p>"

    def test_whitespace_only_body_is_empty(self, processor):
        assert processor.sanitize_html("<html><body>\n   \n</body></html>") == ""

    def test_multiline_script_removed(self, processor):
        html = '<body><script type="text/javascript">\nvar a = 1;\n</script><p>ok</p></body>'
        assert processor.sanitize_html(html) == "<p>ok</p>"


class TestTitleDerivation:
    """Test title search order and cleaning"""

    def test_title_element_first(self, processor):
        html = "<html><head><title>From Title</title></head><body><h1>From H1</h1></body></html>"
        assert processor.derive_title(html, 1) == "From Title"

    def test_heading_order(self, processor):
        assert processor.derive_title("<h3>Three</h3><h2>Two</h2>", 1) == "Two"
        assert processor.derive_title("<h2>Two</h2><h1>One</h1>", 1) == "One"

    def test_empty_title_falls_through_to_heading(self, processor):
        html = "<title>  </title><h1><span></span></h1><h2>Real Title</h2>"
        assert processor.derive_title(html, 4) == "Real Title"

    def test_fallback_uses_ordinal(self, processor):
        assert processor.derive_title("<p>No headings here</p>", 7) == "Chapter 7"

    def test_tags_stripped_and_lines_collapsed(self, processor):
        html = "<h1>\r\n  Part <b>One</b>\r\n\r\n   The Start  \n</h1>"
        assert processor.derive_title(html, 1) == "Part One\n\nThe Start"

    def test_entities_decoded_in_title(self, processor):
        assert processor.derive_title("<h1>Tom &amp; Jerry</h1>", 1) == "Tom & Jerry"

    def test_title_is_capped(self):
        processor = EPUBContentProcessor(title_max_length=5)
        assert processor.derive_title("<h1>Extremely long</h1>", 1) == "Extre"

    def test_case_insensitive_tags(self, processor):
        assert processor.derive_title("<H1 class='t'>Loud</H1>", 1) == "Loud"
