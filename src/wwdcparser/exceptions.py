"""Custom exceptions for wwdcparser."""


class WWDCParserError(Exception):
    """Base exception for wwdcparser operations."""


class FetchError(WWDCParserError):
    """Error while fetching a page."""


class ParseError(WWDCParserError):
    """Error while extracting content from a page."""
