"""Helpers for pulling text out of parsed HTML."""

import re

from bs4 import BeautifulSoup
from bs4.element import Tag

from .exceptions import ParseError

_WHITESPACE_RE = re.compile(r"\s+")
_ZERO_WIDTH_SPACE = "\u200b"

# Fallback markup that is never part of the rendered page
_NON_CONTENT_TAGS = ["noscript", "script", "template"]


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML document with the lxml backend.

    noscript, script and template elements are removed, so a JavaScript
    shell page has no content to select.
    """
    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(_NON_CONTENT_TAGS):
        tag.decompose()
    return soup


def clean_text(text: str) -> str:
    """Drop zero-width spaces and collapse runs of whitespace."""
    text = text.replace(_ZERO_WIDTH_SPACE, "")
    return _WHITESPACE_RE.sub(" ", text).strip()


def element_text(tag: Tag | None) -> str:
    """Return the cleaned text of an element, or an empty string."""
    if tag is None:
        return ""
    return clean_text(tag.get_text())


def require_text(root: BeautifulSoup | Tag, selector: str, field: str) -> str:
    """Return the text of the first element matching a selector.

    Raises:
        ParseError: If nothing matches or the match has no text
    """
    text = element_text(root.select_one(selector))
    if not text:
        raise ParseError(f"Missing {field} ({selector}) in page")
    return text
