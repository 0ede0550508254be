"""
Shared test configuration for browserlite.

Fixtures provide representative pages, settings, and Playwright doubles so
browser-facing code can be tested without a running Chrome.
"""

# Standard library imports
from pathlib import Path
from typing import Any, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Third-party imports
import pytest

# Local imports
from browserlite.config import BrowserConfig, Config, ExtractionSettings
from browserlite.extractor import PageDocument

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# HTML Fixtures
# ============================================================================

ARTICLE_PARAGRAPH = (
    "Readable pages keep their main text in a single container, and the extractor "
    "is expected to find that container even when the page is surrounded by menus."
)


@pytest.fixture
def article_paragraph() -> str:
    return ARTICLE_PARAGRAPH


@pytest.fixture
def article_html() -> str:
    """A conventional article page with chrome around the content."""
    return f"""
    <!DOCTYPE html>
    <html>
    <head><title>Test Article</title></head>
    <body>
        <header><a href="/">Site Header Link</a></header>
        <nav class="menu"><a href="/a">Nav Item One</a><a href="/b">Nav Item Two</a></nav>
        <article>
            <h1>Test Article</h1>
            <p>{ARTICLE_PARAGRAPH}</p>
            <h2>Details</h2>
            <p>{ARTICLE_PARAGRAPH} It also keeps headings and code blocks intact.</p>
            <pre><code>print("hello")</code></pre>
        </article>
        <aside>Aside promo text</aside>
        <footer>Footer copyright text</footer>
    </body>
    </html>
    """


@pytest.fixture
def chrome_heavy_html() -> str:
    """Page whose <main> holds the content next to every kind of chrome."""
    return f"""
    <html>
    <head>
        <title>Fallback Page</title>
        <style>.x {{ color: red }}</style>
        <script>var tracking = "script text";</script>
    </head>
    <body>
        <header>Header banner text</header>
        <nav>Primary navigation text</nav>
        <div class="sidebar">Sidebar widget text</div>
        <div class="navigation">Breadcrumb navigation text</div>
        <main>
            <p>{ARTICLE_PARAGRAPH}</p>
            <p>Second paragraph of the main content area.</p>
        </main>
        <aside>Related links text</aside>
        <footer>Footer legal text</footer>
    </body>
    </html>
    """


@pytest.fixture
def make_document():
    """Build a PageDocument with a default URL."""

    def _make(html: str, final_url: str = "https://example.com/article") -> PageDocument:
        return PageDocument(final_url=final_url, html=html)

    return _make


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def extraction_settings() -> ExtractionSettings:
    return ExtractionSettings()


@pytest.fixture
def browser_config(tmp_path: Path) -> BrowserConfig:
    return BrowserConfig(host="127.0.0.1", port=9333, user_data_dir=tmp_path / "profile")


@pytest.fixture
def test_config(browser_config: BrowserConfig) -> Config:
    return Config(browser=browser_config)


# ============================================================================
# Playwright Doubles
# ============================================================================


def make_page(url: str = "https://example.com/", title: str = "Example", html: str = "<html></html>") -> MagicMock:
    """A Playwright Page double with awaitable methods."""
    page = MagicMock()
    page.url = url
    page.goto = AsyncMock()
    page.title = AsyncMock(return_value=title)
    page.content = AsyncMock(return_value=html)
    page.evaluate = AsyncMock()
    page.screenshot = AsyncMock()
    page.context.cookies = AsyncMock(return_value=[])
    return page


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def fake_session():
    """A BrowserSession double exposing active_page/new_page."""

    def _make(pages: Optional[List[Any]] = None) -> MagicMock:
        session = MagicMock()
        pages = list(pages or [])
        new_page = make_page(url="about:blank", title="")

        async def active_page(create: bool = False):
            if pages:
                return pages[0]
            if create:
                return new_page
            from browserlite.browser.errors import NoActiveTabError

            raise NoActiveTabError()

        session.active_page = AsyncMock(side_effect=active_page)
        session.new_page = AsyncMock(return_value=new_page)
        session.created_page = new_page
        return session

    return _make
