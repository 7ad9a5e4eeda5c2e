"""Interfaces for WWDC Parser components."""

import abc
from typing import Protocol, runtime_checkable

from .models import FetchConfig, MarkdownOutput, WWDCDocument, WWDCVideo


@runtime_checkable
class ContentParser(Protocol):
    """Interface for page parsing components."""

    async def parse(self, url: str) -> WWDCVideo | WWDCDocument:
        """Fetch a page and extract its content.

        Args:
            url: URL of the page

        Returns:
            The extracted content
        """
        ...


@runtime_checkable
class ContentFormatter(Protocol):
    """Interface for content formatting components."""

    def render(self, content: WWDCVideo | WWDCDocument) -> MarkdownOutput:
        """Render extracted content without touching the filesystem."""
        ...

    def format_content(
        self, content: WWDCVideo | WWDCDocument, output_path: str
    ) -> str:
        """Render extracted content and save it.

        Args:
            content: The extracted page content
            output_path: Path to save the formatted output

        Returns:
            Path to the created output file
        """
        ...


class HTTPPageParser(abc.ABC):
    """Abstract base class for parsers that fetch pages over HTTP."""

    def __init__(self, config: FetchConfig | None = None) -> None:
        """Initialize the parser with HTTP config.

        Args:
            config: HTTP fetch configuration
        """
        self.config = config or FetchConfig()

    @abc.abstractmethod
    async def parse(self, url: str) -> WWDCVideo | WWDCDocument:
        """Fetch a page and extract its content."""
        pass
