"""
Browser tools: a short-lived CDP connection per command.
"""

from .actions import (
    UNDEFINED,
    NavigationResult,
    PageEvaluator,
    list_cookies,
    navigate,
    pick_elements,
    screenshot_filename,
    take_screenshot,
)
from .errors import (
    BrowserConnectionError,
    BrowserError,
    ChromeNotFoundError,
    ChromeStartupError,
    CommandTimeoutError,
    NavigationTimeoutError,
    NoActiveTabError,
)
from .launcher import find_chrome, start_chrome, wait_for_chrome
from .loader import PageLoader
from .search import GoogleSearch, SearchResult, clamp_results
from .session import BrowserSession

__all__ = [
    "BrowserConnectionError",
    "BrowserError",
    "BrowserSession",
    "ChromeNotFoundError",
    "ChromeStartupError",
    "CommandTimeoutError",
    "GoogleSearch",
    "NavigationResult",
    "NavigationTimeoutError",
    "NoActiveTabError",
    "PageEvaluator",
    "PageLoader",
    "SearchResult",
    "UNDEFINED",
    "clamp_results",
    "find_chrome",
    "list_cookies",
    "navigate",
    "pick_elements",
    "screenshot_filename",
    "start_chrome",
    "take_screenshot",
    "wait_for_chrome",
]
