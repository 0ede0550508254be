"""
Exceptions raised by the browser tools.
"""

from __future__ import annotations


class BrowserError(Exception):
    """Base class for browser tool failures."""


class BrowserConnectionError(BrowserError):
    """The remote debugging endpoint could not be reached."""

    def __init__(self, endpoint: str, detail: str = "") -> None:
        self.endpoint = endpoint
        message = f"Could not connect to Chrome at {endpoint}"
        super().__init__(f"{message}: {detail}" if detail else message)


class NavigationTimeoutError(BrowserError):
    """A page load did not finish within its timeout."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Navigation timeout after {timeout:g} seconds: {url}")


class NoActiveTabError(BrowserError):
    """A command that works on the current tab found none."""

    def __init__(self) -> None:
        super().__init__("No active tab found. Navigate to a page first.")


class ChromeNotFoundError(BrowserError):
    """No Chrome or Chromium executable was found."""


class ChromeStartupError(BrowserError):
    """A launched browser never answered on its debugging port."""


class CommandTimeoutError(BrowserError):
    """A command exceeded its global deadline."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Global timeout ({timeout:g}s) exceeded")
