"""
Page loading: navigate a tab and hand its rendered DOM to the extractor.
"""

from __future__ import annotations

from typing import Optional

import structlog
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..extractor.models import PageDocument
from .errors import NavigationTimeoutError
from .session import BrowserSession

logger = structlog.get_logger(__name__)


async def goto(page: Page, url: str, timeout: float) -> None:
    """Navigate ``page`` and wait for DOMContentLoaded.

    Raises:
        NavigationTimeoutError: if the load takes longer than ``timeout`` seconds
    """
    try:
        await page.goto(url, wait_until="domcontentloaded", timeout=timeout * 1000)
    except PlaywrightTimeoutError as e:
        raise NavigationTimeoutError(url, timeout) from e


class PageLoader:
    """Produces PageDocuments from a connected session."""

    def __init__(self, session: BrowserSession, timeout: float) -> None:
        self.session = session
        self.timeout = timeout

    async def load(self, url: str, page: Optional[Page] = None) -> PageDocument:
        """Load ``url`` in ``page`` (default: the first tab) and serialize the DOM."""
        if page is None:
            page = await self.session.active_page(create=True)

        await goto(page, url, self.timeout)
        html = await page.content()

        logger.debug("Page loaded", url=url, final_url=page.url, html_length=len(html))
        return PageDocument(final_url=page.url, html=html)
