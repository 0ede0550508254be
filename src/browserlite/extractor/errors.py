"""
Exceptions raised by the content extraction pipeline.
"""

from __future__ import annotations

from .models import ExtractionFailure, FailureReason


class ExtractionError(Exception):
    """Base class for extraction failures."""

    reason: FailureReason

    @property
    def failure(self) -> ExtractionFailure:
        return ExtractionFailure(reason=self.reason, message=str(self))


class InsufficientContentError(ExtractionError):
    """Extracted content is shorter than the configured minimum.

    This is the expected, recoverable failure: the page may still be rendering
    client-side content, so callers are free to retry after a delay.
    """

    reason = FailureReason.INSUFFICIENT_CONTENT

    def __init__(self, content_length: int, min_length: int) -> None:
        self.content_length = content_length
        self.min_length = min_length
        super().__init__(f"Insufficient content extracted ({content_length} chars, minimum {min_length})")

    @property
    def failure(self) -> ExtractionFailure:
        return ExtractionFailure(
            reason=self.reason,
            message=str(self),
            content_length=self.content_length,
            min_length=self.min_length,
        )


class ContentParseError(ExtractionError):
    """The supplied HTML could not be parsed into a DOM tree."""

    reason = FailureReason.PARSE_ERROR
