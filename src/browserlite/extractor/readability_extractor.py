"""
Readability-based primary content extractor.
"""

from __future__ import annotations

import structlog
from bs4 import BeautifulSoup
from readability import Document
from readability.readability import Unparseable

from .cleaning import clean_text
from .errors import ContentParseError
from .markdown import html_to_markdown
from .models import ExtractedContent, PageDocument
from .protocols import Extractor

logger = structlog.get_logger(__name__)

# readability-lxml's title() placeholder when the page has no <title>
_NO_TITLE = "[no-title]"


class ScoredDocument(Document):
    """readability Document that records whether its last scoring pass found a candidate.

    When no candidate clears the threshold, ``summary()`` hands back the whole
    <body> instead of failing; ``found_candidate`` tells the two apart.
    """

    found_candidate = False

    def select_best_candidate(self, candidates):
        best = super().select_best_candidate(candidates)
        self.found_candidate = best is not None
        return best


class ReadabilityExtractor(Extractor):
    """Extractor using readability-lxml for article identification.

    readability builds its own lxml tree from ``document.html``; the shared
    BeautifulSoup tree is only consulted when readability rejects the input.
    """

    name = "readability"

    def __init__(self, min_text_length: int = 25, retry_length: int = 250) -> None:
        self.config = {
            "min_text_length": min_text_length,
            "retry_length": retry_length,
        }

    def extract(self, document: PageDocument, soup: BeautifulSoup) -> ExtractedContent | None:
        """Score candidate containers and convert the winner to Markdown.

        Returns None when no container clears readability's threshold, when
        the summary carries no visible text, or when the page has no text at
        all (e.g. a comment-only document).

        Raises:
            ContentParseError: if readability cannot parse a page that has text
        """
        try:
            doc = ScoredDocument(
                document.html,
                url=document.final_url or None,
                min_text_length=self.config["min_text_length"],
                retry_length=self.config["retry_length"],
            )
            summary = doc.summary(html_partial=True)
            title = doc.short_title()
        except Unparseable as e:
            if not soup.get_text(strip=True):
                logger.debug("Readability rejected a page without text", url=document.final_url, error=str(e))
                return None
            raise ContentParseError(f"Readability could not parse {document.final_url}: {e}") from e

        if not doc.found_candidate:
            logger.debug("Readability found no candidate container", url=document.final_url)
            return None

        if not BeautifulSoup(summary, "lxml").get_text(strip=True):
            logger.debug("Readability summary is empty", url=document.final_url)
            return None

        markdown = clean_text(html_to_markdown(summary))
        if not markdown:
            logger.debug("Readability summary produced no Markdown", url=document.final_url)
            return None

        title = (title or "").strip()
        return ExtractedContent(
            title=title if title and title != _NO_TITLE else None,
            content=markdown,
            method=self.name,
        )
