"""
Single-shot browser actions used by the CLI commands.
"""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from .loader import goto
from .session import BrowserSession

logger = structlog.get_logger(__name__)


@dataclass(slots=True, frozen=True)
class NavigationResult:
    final_url: str
    title: str


async def navigate(session: BrowserSession, url: str, *, new_tab: bool = False, timeout: float = 30.0) -> NavigationResult:
    """Load ``url`` in the first tab, or in a fresh one when ``new_tab`` is set."""
    if new_tab:
        page = await session.new_page()
    else:
        page = await session.active_page(create=True)

    await goto(page, url, timeout)
    result = NavigationResult(final_url=page.url, title=await page.title())
    logger.info("Navigated", url=url, final_url=result.final_url)
    return result


def screenshot_filename(now: Optional[datetime] = None) -> str:
    """``screenshot-YYYY-MM-DD-HH-mm-ss-SSS.png`` in UTC."""
    now = now or datetime.now(timezone.utc)
    stamp = now.strftime("%Y-%m-%d-%H-%M-%S") + f"-{now.microsecond // 1000:03d}"
    return f"screenshot-{stamp}.png"


async def take_screenshot(
    session: BrowserSession,
    *,
    full_page: bool = False,
    directory: Optional[Path] = None,
) -> Path:
    """Save a PNG of the active tab and return its path."""
    page = await session.active_page()
    path = (directory or Path(tempfile.gettempdir())) / screenshot_filename()
    await page.screenshot(path=str(path), full_page=full_page)
    logger.info("Screenshot saved", path=str(path), full_page=full_page)
    return path


class _Undefined:
    """JavaScript ``undefined``, kept distinct from ``null`` (None)."""

    def __repr__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()

_UNDEFINED_MARKER = "__browserlite_undefined__"

# direct eval keeps the page's global scope; the await resolves returned promises
_EVALUATE_WRAPPER = f"""async (source) => {{
  const value = await eval(source);
  return value === undefined ? {{ {_UNDEFINED_MARKER}: true }} : value;
}}"""


class PageEvaluator:
    """
    Runs caller-supplied JavaScript inside a page.

    The source string is shipped to the browser and evaluated there; it is
    never executed by the Python process.
    """

    def __init__(self, session: BrowserSession) -> None:
        self.session = session

    async def evaluate(self, source: str) -> Any:
        page = await self.session.active_page()
        value = await page.evaluate(_EVALUATE_WRAPPER, source)
        if isinstance(value, dict) and value.get(_UNDEFINED_MARKER) is True and len(value) == 1:
            return UNDEFINED
        return value


async def list_cookies(session: BrowserSession) -> List[Dict[str, Any]]:
    """Cookies visible to the active tab's current URL."""
    page = await session.active_page()
    if not page.url.startswith(("http://", "https://")):
        return []
    return list(await page.context.cookies([page.url]))


def picker_script() -> str:
    return (resources.files(__package__) / "assets" / "picker.js").read_text(encoding="utf-8")


async def pick_elements(session: BrowserSession) -> Any:
    """
    Let the user click elements in the active tab.

    Returns a dict for a single click, a list of dicts after a multi-select
    confirmed with Enter, or None when cancelled with Escape.
    """
    page = await session.active_page()
    return await page.evaluate(picker_script())
