"""
ContentExtractor: readability first, chrome-stripping fallback second,
one quality gate at the end.
"""

from __future__ import annotations

import asyncio
import time

import structlog

from ..config.config import ExtractionSettings
from ..observability import histogram, increment
from .dom import document_title, parse_html
from .errors import ExtractionError, InsufficientContentError
from .models import ExtractionResult, PageDocument
from .protocols import Extractor
from .readability_extractor import ReadabilityExtractor
from .soup_extractor import SoupFallbackExtractor

logger = structlog.get_logger(__name__)

UNTITLED = "Untitled"


class ContentExtractor:
    """
    Turns a rendered page into a title and clean Markdown.

    The primary extractor runs first; the fallback runs only when the primary
    returns nothing. Whatever either path produced must then pass the
    minimum-length gate. Instances hold configuration only, so one extractor
    can serve concurrent callers.
    """

    def __init__(
        self,
        settings: ExtractionSettings | None = None,
        primary: Extractor | None = None,
        fallback: Extractor | None = None,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.primary = primary or ReadabilityExtractor(
            min_text_length=self.settings.min_text_length,
            retry_length=self.settings.retry_length,
        )
        self.fallback = fallback or SoupFallbackExtractor()
        self.logger = logger.bind(component="ContentExtractor")

    def extract(self, document: PageDocument) -> ExtractionResult:
        """
        Extract the main content of ``document``.

        Args:
            document: Final URL and rendered HTML of the page

        Returns:
            ExtractionResult with a non-empty title and cleaned Markdown

        Raises:
            ContentParseError: if the HTML cannot be parsed
            InsufficientContentError: if the content is shorter than
                ``settings.min_content_length``
        """
        start_time = time.perf_counter()
        method = "none"
        try:
            soup = parse_html(document, self.settings.parser)
            fallback_title = document_title(soup)

            extracted = self.primary.extract(document, soup)
            if extracted is None:
                self.logger.info("Primary extraction found nothing, using fallback", url=document.final_url)
                extracted = self.fallback.extract(document, soup)

            content = extracted.content if extracted is not None else ""
            method = extracted.method if extracted is not None else self.fallback.name
            title = (extracted.title if extracted is not None else None) or fallback_title or UNTITLED

            if len(content) < self.settings.min_content_length:
                raise InsufficientContentError(len(content), self.settings.min_content_length)

        except ExtractionError as e:
            increment("extractions_total", labels={"method": method, "outcome": e.reason.value})
            self.logger.warning(
                "Extraction failed",
                url=document.final_url,
                method=method,
                reason=e.reason.value,
                error=str(e),
            )
            raise
        finally:
            histogram("extraction_duration_seconds", time.perf_counter() - start_time)

        increment("extractions_total", labels={"method": method, "outcome": "success"})
        histogram("extracted_content_chars", len(content))
        self.logger.info(
            "Extraction completed",
            url=document.final_url,
            method=method,
            title=title,
            text_length=len(content),
        )
        return ExtractionResult(title=title, markdown=content, url=document.final_url, method=method)

    async def aextract(self, document: PageDocument) -> ExtractionResult:
        """Run :meth:`extract` in the default executor so the event loop stays free."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.extract, document)
