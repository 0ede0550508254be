"""
Data models for content extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True, frozen=True)
class PageDocument:
    """Rendered page handed over by the page loader."""

    final_url: str
    html: str


@dataclass(slots=True, frozen=True)
class ExtractedContent:
    """Raw output of a single extraction strategy."""

    title: str | None
    content: str
    method: str


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Successful outcome of the extraction pipeline."""

    title: str
    markdown: str
    url: str
    method: str

    def __post_init__(self) -> None:
        """Validate the result."""
        if not self.title:
            raise ValueError("title must not be empty")

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "title": self.title, "method": self.method, "markdown": self.markdown}


class FailureReason(str, Enum):
    """Why an extraction call failed."""

    INSUFFICIENT_CONTENT = "insufficient-content"
    PARSE_ERROR = "parse-error"


@dataclass(slots=True, frozen=True)
class ExtractionFailure:
    """Tagged failure outcome carried by every ExtractionError."""

    reason: FailureReason
    message: str
    content_length: int | None = None
    min_length: int | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "reason": self.reason.value,
            "message": self.message,
            "content_length": self.content_length,
            "min_length": self.min_length,
        }
