"""
Unit tests for the single-shot browser actions.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from browserlite.browser.actions import (
    UNDEFINED,
    PageEvaluator,
    list_cookies,
    navigate,
    pick_elements,
    picker_script,
    screenshot_filename,
    take_screenshot,
)
from browserlite.browser.errors import NoActiveTabError


class TestNavigate:
    """Test cases for navigate."""

    @pytest.mark.asyncio
    async def test_uses_first_tab(self, fake_session, page_factory):
        page = page_factory(url="https://example.com/landing", title="Landing")
        session = fake_session([page])

        result = await navigate(session, "https://example.com", timeout=30)

        page.goto.assert_awaited_once_with("https://example.com", wait_until="domcontentloaded", timeout=30000)
        assert result.final_url == "https://example.com/landing"
        assert result.title == "Landing"
        session.new_page.assert_not_called()

    @pytest.mark.asyncio
    async def test_new_tab(self, fake_session, page_factory):
        existing = page_factory()
        session = fake_session([existing])

        await navigate(session, "https://example.org", new_tab=True)

        session.new_page.assert_awaited_once()
        session.created_page.goto.assert_awaited_once()
        existing.goto.assert_not_called()

    @pytest.mark.asyncio
    async def test_opens_tab_when_none_exists(self, fake_session):
        session = fake_session([])
        await navigate(session, "https://example.org")
        session.created_page.goto.assert_awaited_once()


class TestScreenshot:
    """Test cases for screenshots."""

    def test_filename_format(self):
        now = datetime(2024, 3, 9, 7, 5, 1, 42_000, tzinfo=timezone.utc)
        assert screenshot_filename(now) == "screenshot-2024-03-09-07-05-01-042.png"

    @pytest.mark.asyncio
    async def test_saves_into_directory(self, fake_session, page_factory, tmp_path: Path):
        page = page_factory()
        path = await take_screenshot(fake_session([page]), full_page=True, directory=tmp_path)

        assert path.parent == tmp_path
        assert path.name.startswith("screenshot-") and path.suffix == ".png"
        page.screenshot.assert_awaited_once_with(path=str(path), full_page=True)

    @pytest.mark.asyncio
    async def test_requires_a_tab(self, fake_session):
        with pytest.raises(NoActiveTabError):
            await take_screenshot(fake_session([]))


class TestPageEvaluator:
    """Test cases for PageEvaluator."""

    @pytest.mark.asyncio
    async def test_source_is_passed_as_argument(self, fake_session, page_factory):
        page = page_factory()
        page.evaluate.return_value = "Example Domain"

        value = await PageEvaluator(fake_session([page])).evaluate("document.title")

        assert value == "Example Domain"
        script, source = page.evaluate.call_args.args
        assert source == "document.title"
        assert "eval(source)" in script

    @pytest.mark.asyncio
    async def test_undefined_marker(self, fake_session, page_factory):
        page = page_factory()
        page.evaluate.return_value = {"__browserlite_undefined__": True}

        assert await PageEvaluator(fake_session([page])).evaluate("void 0") is UNDEFINED

    @pytest.mark.asyncio
    async def test_null_stays_none(self, fake_session, page_factory):
        page = page_factory()
        page.evaluate.return_value = None

        assert await PageEvaluator(fake_session([page])).evaluate("null") is None

    @pytest.mark.asyncio
    async def test_objects_with_extra_keys_are_values(self, fake_session, page_factory):
        page = page_factory()
        page.evaluate.return_value = {"__browserlite_undefined__": True, "other": 1}

        value = await PageEvaluator(fake_session([page])).evaluate("x")
        assert value == {"__browserlite_undefined__": True, "other": 1}

    def test_undefined_repr(self):
        assert repr(UNDEFINED) == "undefined"


class TestCookies:
    """Test cases for list_cookies."""

    @pytest.mark.asyncio
    async def test_cookies_for_current_url(self, fake_session, page_factory):
        page = page_factory(url="https://example.com/a")
        page.context.cookies.return_value = [{"name": "sid", "value": "1"}]

        cookies = await list_cookies(fake_session([page]))

        assert cookies == [{"name": "sid", "value": "1"}]
        page.context.cookies.assert_awaited_once_with(["https://example.com/a"])

    @pytest.mark.asyncio
    async def test_non_http_page_has_no_cookies(self, fake_session, page_factory):
        page = page_factory(url="about:blank")
        assert await list_cookies(fake_session([page])) == []
        page.context.cookies.assert_not_called()


class TestPicker:
    """Test cases for the element picker."""

    def test_script_is_packaged(self):
        script = picker_script()
        assert "Escape" in script
        assert "resolve" in script

    @pytest.mark.asyncio
    async def test_pick_returns_page_result(self, fake_session, page_factory):
        page = page_factory()
        page.evaluate.return_value = {"tag": "a", "selector": "a.link"}

        assert await pick_elements(fake_session([page])) == {"tag": "a", "selector": "a.link"}
        page.evaluate.assert_awaited_once_with(picker_script())
