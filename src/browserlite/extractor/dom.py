"""
DOM parsing shared by the extraction strategies.
"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .errors import ContentParseError
from .models import PageDocument


def parse_html(document: PageDocument, parser: str = "lxml") -> BeautifulSoup:
    """Parse the rendered HTML of a page into a fresh tree.

    Each call returns its own tree, so callers may mutate it freely.

    Raises:
        ContentParseError: if the input is not a string, is empty, or the
            parser rejects it
    """
    html = document.html
    if not isinstance(html, str):
        raise ContentParseError(f"Expected HTML text, got {type(html).__name__}")
    if not html.strip():
        raise ContentParseError(f"Document is empty: {document.final_url}")

    try:
        return BeautifulSoup(html, parser)
    except ParserRejectedMarkup as e:
        raise ContentParseError(f"Could not parse HTML from {document.final_url}: {e}") from e


def document_title(soup: BeautifulSoup) -> str | None:
    """Return the stripped <title> text, or None when absent or blank."""
    title_tag = soup.find("title")
    if title_tag is None:
        return None
    title = title_tag.get_text(strip=True)
    return title or None
