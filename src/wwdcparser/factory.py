"""Factory classes for creating WWDC Parser components."""

import logging
from typing import Literal

from .formatter import MarkdownFormatter
from .interfaces import ContentFormatter, ContentParser
from .models import ContentType, FetchConfig
from .parsers import DocumentPageParser, VideoPageParser

logger = logging.getLogger("wwdcparser")


class ParserComponentFactory:
    """Factory for creating WWDC Parser components."""

    @staticmethod
    def create_parser(
        content_type: ContentType,
        config: FetchConfig | None = None,
    ) -> ContentParser:
        """Create a parser for the given content type.

        Args:
            content_type: Kind of page to parse
            config: HTTP fetch configuration

        Returns:
            Implementation of ContentParser
        """
        if content_type == "video":
            return VideoPageParser(config)
        if content_type == "document":
            return DocumentPageParser(config)

        raise ValueError(f"Unsupported content type: {content_type}")

    @staticmethod
    def create_formatter(
        format_type: Literal["markdown"] = "markdown",
    ) -> ContentFormatter:
        """Create a content formatter implementation.

        Args:
            format_type: Type of formatter to create

        Returns:
            Implementation of ContentFormatter
        """
        if format_type == "markdown":
            return MarkdownFormatter()

        raise ValueError(f"Unsupported format type: {format_type}")
