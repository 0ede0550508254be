"""
Short-lived Playwright connection to a browser's remote debugging endpoint.
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog
from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from ..config.config import BrowserConfig
from .errors import BrowserConnectionError, NoActiveTabError

logger = structlog.get_logger(__name__)


class BrowserSession:
    """
    Connects to an already running Chrome over CDP for the duration of an
    ``async with`` block.

    The browser itself is never closed: leaving the block only stops the
    Playwright driver, so tabs and the user-data directory survive for the
    next command.
    """

    def __init__(self, config: BrowserConfig) -> None:
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    @property
    def browser(self) -> Browser:
        if self._browser is None:
            raise RuntimeError("BrowserSession is not connected")
        return self._browser

    async def __aenter__(self) -> BrowserSession:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.disconnect()

    async def connect(self) -> None:
        endpoint = self.config.endpoint
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.connect_over_cdp(
                endpoint,
                timeout=self.config.connect_timeout * 1000,
            )
        except PlaywrightError as e:
            await self._playwright.stop()
            self._playwright = None
            raise BrowserConnectionError(endpoint, e.message) from e

        logger.debug("Connected to browser", endpoint=endpoint, version=self._browser.version)

    async def disconnect(self) -> None:
        if self._playwright is not None:
            await self._playwright.stop()
        self._playwright = None
        self._browser = None

    def pages(self) -> List[Page]:
        """All open tabs across the browser's contexts, in creation order."""
        return [page for context in self.browser.contexts for page in context.pages]

    async def active_page(self, create: bool = False) -> Page:
        """Return the first open tab.

        Args:
            create: open a new tab when none exists instead of raising

        Raises:
            NoActiveTabError: if no tab is open and ``create`` is False
        """
        pages = self.pages()
        if pages:
            return pages[0]
        if create:
            return await self.new_page()
        raise NoActiveTabError()

    async def new_page(self) -> Page:
        contexts = self.browser.contexts
        context = contexts[0] if contexts else await self.browser.new_context()
        return await context.new_page()
