"""
BeautifulSoup-based fallback extractor.

Used when readability finds nothing: strips page chrome, picks the most
likely main-content container and returns its plain text.
"""

from __future__ import annotations

import structlog
from bs4 import BeautifulSoup, NavigableString, Tag

from .cleaning import clean_text
from .models import ExtractedContent, PageDocument
from .protocols import Extractor

logger = structlog.get_logger(__name__)

BLOCK_TAGS = [
    "address",
    "article",
    "blockquote",
    "dd",
    "div",
    "dl",
    "dt",
    "figcaption",
    "figure",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "li",
    "main",
    "ol",
    "p",
    "pre",
    "section",
    "table",
    "tr",
    "ul",
]


class SoupFallbackExtractor(Extractor):
    """Deterministic chrome-stripping extractor built on BeautifulSoup."""

    name = "fallback"

    def __init__(self) -> None:
        self.config = {
            "remove_tags": ["script", "style", "noscript", "nav", "header", "footer", "aside"],
            "remove_classes": ["nav", "navigation", "menu", "sidebar"],
            # tried in order; body and then the whole document are the last resort
            "content_selectors": ["main", "article", '[role="main"]', ".content", "#content"],
        }

    def extract(self, document: PageDocument, soup: BeautifulSoup) -> ExtractedContent | None:
        """Extract plain text from the main-content container of ``soup``.

        The tree is modified in place.
        """
        self._strip_chrome(soup)

        root = self._select_root(soup)
        self._mark_blocks(root)
        text = clean_text(root.get_text())

        logger.debug(
            "Fallback extraction finished",
            url=document.final_url,
            root=root.name,
            text_length=len(text),
        )
        return ExtractedContent(title=None, content=text, method=self.name)

    def _strip_chrome(self, soup: BeautifulSoup) -> None:
        doomed = soup.find_all(self.config["remove_tags"])
        for class_name in self.config["remove_classes"]:
            doomed.extend(soup.find_all(class_=class_name))

        for element in doomed:
            # nested matches die with their ancestor
            if not element.decomposed:
                element.decompose()

    def _select_root(self, soup: BeautifulSoup) -> Tag:
        for selector in self.config["content_selectors"]:
            element = soup.select_one(selector)
            if element is not None:
                return element

        body = soup.find("body")
        if body is not None:
            return body

        # bodiless document: <head> metadata such as <title> is not content
        head = soup.find("head")
        if head is not None:
            head.decompose()
        return soup

    def _mark_blocks(self, root: Tag) -> None:
        """Turn block boundaries and <br> into newlines so paragraphs survive get_text()."""
        for br in root.find_all("br"):
            br.replace_with(NavigableString("\n"))

        blocks = root.find_all(BLOCK_TAGS)
        if root.name in BLOCK_TAGS:
            blocks.append(root)
        for block in blocks:
            block.insert(0, NavigableString("\n\n"))
            block.append(NavigableString("\n\n"))
