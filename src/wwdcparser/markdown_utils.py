"""Functions for naming generated markdown files."""

from .models import ContentType

_FILENAME_PREFIXES: dict[str, str] = {
    "video": "video",
    "document": "doc",
}

_UNSAFE_CHARS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|", " ")


def sanitize_filename(name: str) -> str:
    """Make a title safe to use as part of a filename.

    Args:
        name: Title to sanitize

    Returns:
        Lowercased title with path separators, shell-unsafe characters and
        spaces replaced by underscores
    """
    result = name.strip()
    for char in _UNSAFE_CHARS:
        result = result.replace(char, "_")
    return result.lower()


def build_output_filename(content_type: ContentType, title: str) -> str:
    """Build the markdown filename for extracted content.

    Args:
        content_type: Kind of page the content came from
        title: Extracted content title

    Returns:
        Filename in the form wwdc_<video|doc>_<title>.md

    Raises:
        ValueError: If the title is blank
    """
    sanitized = sanitize_filename(title)
    if not sanitized:
        raise ValueError("Cannot build a filename from an empty title")
    return f"wwdc_{_FILENAME_PREFIXES[content_type]}_{sanitized}.md"
