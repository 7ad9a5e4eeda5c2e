"""Functions for converting WWDC and documentation pages to markdown."""

import logging
import os
from urllib.parse import urlparse

from .factory import ParserComponentFactory
from .markdown_utils import build_output_filename
from .models import ContentRequest, ContentType, ConversionResult, FetchConfig

logger = logging.getLogger("wwdcparser")

_DOCUMENT_PATH_MARKERS = ("/documentation/", "/tutorials/")


def infer_content_type(url: str) -> ContentType:
    """Guess the content type of a developer.apple.com URL.

    Args:
        url: Page URL

    Returns:
        "document" for documentation and tutorial pages, "video" otherwise
    """
    path = urlparse(url).path
    if any(marker in f"{path}/" for marker in _DOCUMENT_PATH_MARKERS):
        return "document"
    return "video"


async def convert_content(
    url: str,
    content_type: ContentType | None = None,
    output_dir: str | None = None,
    config: FetchConfig | None = None,
) -> ConversionResult:
    """Convert a WWDC video page or documentation page into a markdown file.

    Nothing is written unless the page was fetched and parsed successfully.

    Args:
        url: URL of the page
        content_type: Kind of page (inferred from the URL if None)
        output_dir: Directory for the markdown file (defaults to the
            current working directory)
        config: HTTP fetch configuration

    Returns:
        ConversionResult describing the written file

    Raises:
        ValueError: If the URL is not an http(s) URL
        FetchError: If the page cannot be fetched
        ParseError: If expected content is missing from the page
    """
    if content_type is None:
        content_type = infer_content_type(url)
        logger.debug(f"Inferred content type '{content_type}' for {url}")

    request = ContentRequest(url=url, content_type=content_type)
    logger.info(f"Converting {request.content_type} page: {request.url}")

    parser = ParserComponentFactory.create_parser(request.content_type, config)
    content = await parser.parse(request.url)

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    else:
        output_dir = os.getcwd()

    filename = build_output_filename(request.content_type, content.title)
    output_path = os.path.join(output_dir, filename)

    formatter = ParserComponentFactory.create_formatter("markdown")
    markdown_path = formatter.format_content(content, output_path)

    return ConversionResult(
        title=content.title,
        content_type=request.content_type,
        source_url=request.url,
        markdown_path=markdown_path,
    )
