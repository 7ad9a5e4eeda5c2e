"""Models for WWDC Parser."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

ContentType = Literal["video", "document"]
ResourceType = Literal["document", "download", "video"]

RESOURCE_TYPE_LABELS: dict[str, str] = {
    "document": "Documentation",
    "download": "Download",
    "video": "Video",
}

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ContentRequest(BaseModel):
    """Model representing a single conversion request."""

    url: str
    content_type: ContentType = "video"

    @field_validator("url")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return value


class FetchConfig(BaseModel):
    """Model representing HTTP fetch configuration."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = Field(
        default_factory=lambda: {
            "Accept": (
                "text/html,application/xhtml+xml,application/xml;q=0.9,"
                "image/avif,image/webp,*/*;q=0.8"
            ),
            "Accept-Language": "en-US,en;q=0.9",
            "Upgrade-Insecure-Requests": "1",
        }
    )

    def request_headers(self) -> dict[str, str]:
        """Return the full header set sent with every request."""
        return {"User-Agent": self.user_agent, **self.headers}


class Resource(BaseModel):
    """Model representing a link listed under a session's resources."""

    title: str
    url: str
    resource_type: ResourceType = "document"

    @property
    def type_label(self) -> str:
        """Human readable name of the resource type."""
        return RESOURCE_TYPE_LABELS[self.resource_type]


class CodeSample(BaseModel):
    """Model representing a code sample shown during a session."""

    title: str
    timestamp: str = ""
    code: str
    language: str = "swift"


class WWDCVideo(BaseModel):
    """Model representing the content of a WWDC session video page."""

    title: str
    url: str
    overview: str
    transcript: str = ""
    code_samples: list[CodeSample] = []
    resources: list[Resource] = []


class DocumentItem(BaseModel):
    """Model representing one linked topic of a documentation page."""

    title: str
    description: str = ""
    url: str = ""
    item_type: str = "article"


class DocumentSection(BaseModel):
    """Model representing a topic group of a documentation page."""

    title: str
    items: list[DocumentItem] = []


class WWDCDocument(BaseModel):
    """Model representing the content of an Apple Developer documentation page."""

    title: str
    url: str = ""
    description: str = ""
    overview: str = ""
    notes: list[str] = []
    sections: list[DocumentSection] = []


class MarkdownOutput(BaseModel):
    """Rendered markdown together with the title it was derived from."""

    content: str
    title: str


class ConversionResult(BaseModel):
    """Model representing the outcome of one conversion."""

    title: str
    content_type: ContentType
    source_url: str
    markdown_path: str

    def __str__(self) -> str:
        """Return a string representation of the result."""
        return f"{self.title} ({self.content_type})"
