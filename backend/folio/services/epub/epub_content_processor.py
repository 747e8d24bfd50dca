import re
from typing import Callable, List, Optional

from ...config import TITLE_MAX_LENGTH

# Named entities decoded in content and titles. "&amp;" comes last so that an
# escaped entity such as "&amp;lt;" decodes to the text "&lt;" and not to "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&apos;", "'"),
    ("&amp;", "&"),
)

_FLAGS = re.DOTALL | re.IGNORECASE

_SCRIPT_BLOCK = re.compile(r"<script\b[^>]*>.*?</script\s*>", _FLAGS)
_STYLE_BLOCK = re.compile(r"<style\b[^>]*>.*?</style\s*>", _FLAGS)
# Unterminated script tags would otherwise survive the block pass
_STRAY_SCRIPT_TAG = re.compile(r"</?script\b[^>]*>", re.IGNORECASE)
_STRIPPED_TAGS = (
    re.compile(r"<meta\b[^>]*>", re.IGNORECASE),
    re.compile(r"<link\b[^>]*>", re.IGNORECASE),
)
_EVENT_HANDLER_QUOTED = re.compile(r"""\s+on\w+\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
_EVENT_HANDLER_BARE = re.compile(r"\s+on\w+\s*=\s*[^\s>]+", re.IGNORECASE)
_JAVASCRIPT_URL = re.compile(
    r"""\s*(href|src)\s*=\s*["']\s*javascript:[^"']*["']""", re.IGNORECASE
)
_OPENING_TAG = re.compile(r"<[a-zA-Z][^>]*>")

_BODY = re.compile(r"<body\b[^>]*>(.*?)</body\s*>", _FLAGS)
_HEAD = re.compile(r"<head\b[^>]*>.*?</head\s*>", _FLAGS)
_HTML_OR_BODY_TAG = re.compile(r"</?(?:html|body)\b[^>]*>", re.IGNORECASE)
_DECLARATIONS = re.compile(r"<!DOCTYPE[^>]*>|<\?xml[^>]*\?>", re.IGNORECASE)

_ANY_TAG = re.compile(r"<[^>]*>")


def decode_entities(text: str) -> str:
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text


def _strip_unsafe_attributes(tag: re.Match) -> str:
    # Attributes only; text between tags is left alone
    markup = _EVENT_HANDLER_QUOTED.sub("", tag.group(0))
    markup = _EVENT_HANDLER_BARE.sub("", markup)
    return _JAVASCRIPT_URL.sub("", markup)


def _heading_matcher(tag: str) -> Callable[[str], Optional[str]]:
    pattern = re.compile(rf"<{tag}\b[^>]*>(.*?)</{tag}\s*>", _FLAGS)

    def match(html: str) -> Optional[str]:
        found = pattern.search(html)
        return found.group(1) if found else None

    return match


# Evaluated in order; the first match that is non-empty after cleaning wins
TITLE_MATCHERS: List[Callable[[str], Optional[str]]] = [
    _heading_matcher("title"),
    _heading_matcher("h1"),
    _heading_matcher("h2"),
    _heading_matcher("h3"),
]


class EPUBContentProcessor:
    def __init__(self, title_max_length: int = TITLE_MAX_LENGTH):
        self.title_max_length = title_max_length

    def sanitize_html(self, html_content: str) -> str:
        """
        Sanitize a content document for display.

        Removes script and style blocks, meta and link tags, inline event
        handlers and javascript: URLs, and decodes the standard named
        entities. Returns only the markup inside <body> when a body is
        present; otherwise the head, html/body wrappers and declarations are
        dropped. All other markup is preserved.
        """
        html_content = _SCRIPT_BLOCK.sub("", html_content)
        html_content = _STYLE_BLOCK.sub("", html_content)
        for pattern in _STRIPPED_TAGS:
            html_content = pattern.sub("", html_content)

        html_content = decode_entities(html_content)

        # Escaped script markup becomes live once decoded
        html_content = _SCRIPT_BLOCK.sub("", html_content)
        html_content = _STRAY_SCRIPT_TAG.sub("", html_content)

        html_content = _OPENING_TAG.sub(_strip_unsafe_attributes, html_content)

        html_content = html_content.strip()

        # Extract content from body tag if it exists
        body_match = _BODY.search(html_content)
        if body_match:
            html_content = body_match.group(1)
        else:
            html_content = _HEAD.sub("", html_content)
            html_content = _HTML_OR_BODY_TAG.sub("", html_content)

        html_content = _DECLARATIONS.sub("", html_content)

        return html_content.strip()

    def clean_title_text(self, text: str) -> str:
        """
        Reduce a fragment of markup to plain title text.

        Tags are stripped, line endings normalized, blank lines dropped and
        the remaining lines joined by a blank line. The result is capped at
        ``title_max_length`` characters.
        """
        text = _ANY_TAG.sub("", text)
        text = decode_entities(text)
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = [line.strip() for line in text.split("\n")]
        return "\n\n".join(line for line in lines if line)[: self.title_max_length]

    def extract_title(self, html_content: str) -> Optional[str]:
        """Return the first non-empty <title>, <h1>, <h2> or <h3> text, if any"""
        for matcher in TITLE_MATCHERS:
            raw = matcher(html_content)
            if raw is None:
                continue
            title = self.clean_title_text(raw)
            if title:
                return title
        return None

    def derive_title(self, html_content: str, ordinal: int) -> str:
        return self.extract_title(html_content) or f"Chapter {ordinal}"
