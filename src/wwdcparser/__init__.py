"""WWDCParser - Convert Apple WWDC video and documentation pages to markdown."""

# Re-export public API
from .converter import convert_content, infer_content_type
from .exceptions import FetchError, ParseError, WWDCParserError
from .models import ConversionResult, WWDCDocument, WWDCVideo

# Version information
__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "FetchError",
    "ParseError",
    "WWDCDocument",
    "WWDCParserError",
    "WWDCVideo",
    "convert_content",
    "infer_content_type",
]
