"""
Google search through the connected browser, optionally extracting each hit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote_plus

import structlog
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from ..config.config import SearchConfig
from ..extractor.content_extractor import ContentExtractor
from ..extractor.errors import ExtractionError
from .errors import BrowserError
from .loader import PageLoader, goto
from .session import BrowserSession

logger = structlog.get_logger(__name__)

SEARCH_URL = "https://www.google.com/search?q={query}"

# Google result blocks: title in <h3>, first anchor is the target
_RESULTS_SCRIPT = """() => {
  const items = [];
  for (const el of document.querySelectorAll('div.MjjYud')) {
    const titleEl = el.querySelector('h3');
    const linkEl = el.querySelector('a');
    const snippetEl = el.querySelector('div[data-sncf]') || el.querySelector('.VwiC3b');
    if (titleEl && linkEl) {
      items.push({
        title: titleEl.textContent,
        link: linkEl.href,
        snippet: snippetEl ? snippetEl.textContent : '',
      });
    }
  }
  return items;
}"""


@dataclass(slots=True)
class SearchResult:
    title: str
    link: str
    snippet: str
    content: Optional[str] = None


def clamp_results(requested: Optional[int], default: int, maximum: int) -> int:
    """Missing or non-positive counts fall back to ``default``; the rest are capped at ``maximum``."""
    if not requested or requested < 1:
        return min(default, maximum)
    return min(requested, maximum)


class GoogleSearch:
    """Runs a query in the first tab and scrapes the result page."""

    def __init__(self, session: BrowserSession, extractor: ContentExtractor, config: SearchConfig) -> None:
        self.session = session
        self.extractor = extractor
        self.config = config
        self.loader = PageLoader(session, config.page_timeout)

    async def search(self, query: str, num_results: int, fetch_content: bool = False) -> List[SearchResult]:
        page = await self.session.active_page(create=True)
        await goto(page, SEARCH_URL.format(query=quote_plus(query)), self.config.page_timeout)

        raw = await page.evaluate(_RESULTS_SCRIPT)
        results = [
            SearchResult(title=item.get("title") or "", link=item.get("link") or "", snippet=item.get("snippet") or "")
            for item in raw[:num_results]
        ]
        logger.info("Search finished", query=query, found=len(raw), kept=len(results))

        if fetch_content:
            for result in results:
                result.content = await self._fetch_content(page, result.link)

        return results

    async def _fetch_content(self, page: Page, url: str) -> Optional[str]:
        """Extracted Markdown for ``url`` truncated to ``content_chars``, or None on any failure."""
        try:
            document = await self.loader.load(url, page)
            result = await self.extractor.aextract(document)
        except (BrowserError, ExtractionError, PlaywrightError) as e:
            logger.warning("Failed to extract content", url=url, error=str(e))
            return None
        return result.markdown[: self.config.content_chars]
