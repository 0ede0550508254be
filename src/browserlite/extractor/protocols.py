"""
Protocols for pluggable extraction strategies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup

from .models import ExtractedContent, PageDocument


@runtime_checkable
class Extractor(Protocol):
    """Pluggable PageDocument-to-ExtractedContent strategy."""

    name: str

    def extract(self, document: PageDocument, soup: BeautifulSoup) -> ExtractedContent | None:
        """Extract content from a parsed page.

        Args:
            document: The page being extracted
            soup: A tree parsed from ``document.html`` owned by this call;
                strategies may mutate it or build their own tree instead

        Returns:
            ExtractedContent, or None when the strategy found nothing
        """
        ...
