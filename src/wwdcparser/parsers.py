"""Implementations of page parsing components."""

import logging

from .document import parse_document_html
from .http_utils import fetch_html
from .interfaces import HTTPPageParser
from .models import WWDCDocument, WWDCVideo
from .video import parse_video_html

logger = logging.getLogger("wwdcparser")


class VideoPageParser(HTTPPageParser):
    """ContentParser for WWDC session video pages."""

    async def parse(self, url: str) -> WWDCVideo:
        """Fetch a session page and extract the session.

        Args:
            url: URL of the session video page

        Returns:
            The extracted WWDCVideo
        """
        logger.info(f"Parsing WWDC video page {url}")
        html = await fetch_html(url, self.config)
        return parse_video_html(html, url)


class DocumentPageParser(HTTPPageParser):
    """ContentParser for Apple Developer documentation pages."""

    async def parse(self, url: str) -> WWDCDocument:
        """Fetch a documentation page and extract it.

        Args:
            url: URL of the documentation page

        Returns:
            The extracted WWDCDocument
        """
        logger.info(f"Parsing documentation page {url}")
        html = await fetch_html(url, self.config)
        return parse_document_html(html, url)
