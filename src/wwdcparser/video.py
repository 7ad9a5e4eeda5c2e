"""Extraction of WWDC session video pages."""

import logging
from urllib.parse import urljoin

from bs4.element import Tag

from .html_utils import element_text, parse_html, require_text
from .models import CodeSample, Resource, ResourceType, WWDCVideo

logger = logging.getLogger("wwdcparser")

TITLE_SELECTOR = "h1"
OVERVIEW_SELECTOR = ".supplement.details > p"
TRANSCRIPT_SELECTOR = ".supplement.transcript .sentence"
CODE_SAMPLE_SELECTOR = ".sample-code-main-container"
RESOURCE_SELECTOR = ".links.small li"

# Caption format: "10:40 - Setting scene association behavior"
CAPTION_SEPARATOR = " - "


def parse_video_html(html: str, url: str) -> WWDCVideo:
    """Extract a WWDC session from the HTML of its video page.

    Args:
        html: HTML of the session page
        url: URL the page was fetched from

    Returns:
        WWDCVideo with title, overview, transcript, code samples and resources

    Raises:
        ParseError: If the title or overview cannot be found
    """
    soup = parse_html(html)

    title = require_text(soup, TITLE_SELECTOR, "title")
    overview = require_text(soup, OVERVIEW_SELECTOR, "overview")

    transcript = " ".join(
        text
        for text in (element_text(el) for el in soup.select(TRANSCRIPT_SELECTOR))
        if text
    )

    code_samples = [
        sample
        for sample in (
            _parse_code_sample(container)
            for container in soup.select(CODE_SAMPLE_SELECTOR)
        )
        if sample is not None
    ]

    resources = [
        resource
        for resource in (
            _parse_resource(item, url) for item in soup.select(RESOURCE_SELECTOR)
        )
        if resource is not None
    ]

    logger.debug(
        f"Parsed session '{title}': {len(code_samples)} code samples, "
        f"{len(resources)} resources, transcript of {len(transcript)} characters"
    )

    return WWDCVideo(
        title=title,
        url=url,
        overview=overview,
        transcript=transcript,
        code_samples=code_samples,
        resources=resources,
    )


def split_code_caption(caption: str) -> tuple[str, str]:
    """Split a code sample caption into (timestamp, title).

    Captions without a separator have no timestamp.
    """
    timestamp, sep, title = caption.partition(CAPTION_SEPARATOR)
    if not sep:
        return "", caption
    return timestamp.strip(), title.strip()


def resource_type_from_classes(classes: list[str]) -> ResourceType:
    """Map the CSS classes of a resource list item to a resource type."""
    joined = " ".join(classes)
    if "document" in joined:
        return "document"
    if "download" in joined:
        return "download"
    if "video" in joined:
        return "video"
    return "document"


def _parse_code_sample(container: Tag) -> CodeSample | None:
    caption = container.select_one("p")
    code = container.select_one("code")
    if caption is None or code is None:
        logger.debug("Skipping code sample without caption or code")
        return None

    timestamp, title = split_code_caption(element_text(caption))
    return CodeSample(title=title, timestamp=timestamp, code=code.get_text())


def _parse_resource(item: Tag, page_url: str) -> Resource | None:
    link = item.select_one("a[href]")
    if link is None:
        return None

    classes = item.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()

    return Resource(
        title=element_text(link),
        url=urljoin(page_url, str(link["href"])),
        resource_type=resource_type_from_classes(list(classes)),
    )
