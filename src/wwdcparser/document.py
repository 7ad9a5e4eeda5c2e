"""Extraction of Apple Developer documentation pages."""

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from .html_utils import element_text, parse_html, require_text
from .models import DocumentItem, DocumentSection, WWDCDocument

logger = logging.getLogger("wwdcparser")

TITLE_SELECTOR = "h1"
DESCRIPTION_SELECTOR = "meta[name='description']"
OVERVIEW_SELECTOR = ".content > p"
NOTE_SELECTOR = ".note"
SECTION_SELECTOR = ".contenttable-section"
SECTION_TITLE_SELECTOR = ".contenttable-title"
ITEM_SELECTOR = ".link-block"
ITEM_TITLE_SELECTOR = ".identifier, .decorated-title, code"
ITEM_FALLBACK_TITLE_SELECTOR = ".link span"

DEFAULT_ITEM_TYPE = "article"


def parse_document_html(html: str, url: str = "") -> WWDCDocument:
    """Extract a documentation page.

    Args:
        html: HTML of the documentation page
        url: URL the page was fetched from, used to resolve topic links

    Returns:
        WWDCDocument with description, overview, notes and topic sections

    Raises:
        ParseError: If the page has no title
    """
    soup = parse_html(html)

    title = require_text(soup, TITLE_SELECTOR, "title")

    description = ""
    meta = soup.select_one(DESCRIPTION_SELECTOR)
    if meta is not None:
        description = str(meta.get("content") or "").strip()

    sections = [
        _parse_section(section, url) for section in soup.select(SECTION_SELECTOR)
    ]

    document = WWDCDocument(
        title=title,
        url=url,
        description=description,
        overview=_parse_overview(soup),
        notes=[_parse_note(note) for note in soup.select(NOTE_SELECTOR)],
        sections=sections,
    )
    logger.debug(
        f"Parsed document '{title}': {len(document.notes)} notes, "
        f"{len(sections)} sections"
    )
    return document


def _parse_overview(soup: BeautifulSoup) -> str:
    # Topic item descriptions are .content blocks too
    paragraphs = [
        element_text(p)
        for p in soup.select(OVERVIEW_SELECTOR)
        if p.find_parent(class_="contenttable-section") is None
    ]
    return "\n".join(text for text in paragraphs if text)


def _parse_note(note: Tag) -> str:
    label = element_text(note.select_one(".label"))
    content = "\n".join(element_text(p) for p in note.select("p:not(.label)"))
    return f"{label}: {content}"


def _parse_section(section: Tag, page_url: str) -> DocumentSection:
    return DocumentSection(
        title=element_text(section.select_one(SECTION_TITLE_SELECTOR)),
        items=[_parse_item(item, page_url) for item in section.select(ITEM_SELECTOR)],
    )


def _parse_item(item: Tag, page_url: str) -> DocumentItem:
    title = element_text(item.select_one(ITEM_TITLE_SELECTOR))
    if not title:
        title = element_text(item.select_one(ITEM_FALLBACK_TITLE_SELECTOR))

    url = ""
    link = item.select_one("a[href]")
    if link is not None:
        url = urljoin(page_url or "https://developer.apple.com", str(link["href"]))

    return DocumentItem(
        title=title,
        description=element_text(item.select_one(".content")),
        url=url,
        item_type=element_text(item.select_one(".decorator")) or DEFAULT_ITEM_TYPE,
    )
