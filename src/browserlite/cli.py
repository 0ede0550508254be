"""Command-line interface for browserlite."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Awaitable, Optional, TypeVar

import click
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from browserlite import __version__
from browserlite.browser import (
    BrowserConnectionError,
    BrowserSession,
    ChromeNotFoundError,
    ChromeStartupError,
    CommandTimeoutError,
    GoogleSearch,
    NavigationTimeoutError,
    PageEvaluator,
    PageLoader,
    clamp_results,
    list_cookies,
    navigate,
    pick_elements,
    start_chrome,
    take_screenshot,
)
from browserlite.browser.formatting import format_cookies, format_element_info, format_search_results, format_value
from browserlite.config import Config, load_config
from browserlite.extractor import ContentExtractor
from browserlite.observability import configure_logging, increment

# diagnostics only; command results go to stdout through click.echo
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _fail(message: str, *hints: str) -> None:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    for hint in hints:
        err_console.print(f"  {escape(hint)}")


def _report_error(error: Exception, settings: Config, label: str) -> None:
    if isinstance(error, BrowserConnectionError):
        _fail(
            f"Could not connect to Chrome on {settings.browser.host}:{settings.browser.port}",
            "Make sure Chrome is running with remote debugging enabled.",
            "Run: browserlite start",
        )
    elif isinstance(error, NavigationTimeoutError):
        _fail(
            f"Navigation timeout after {error.timeout:g} seconds",
            "The page took too long to load.",
            f"URL: {error.url}",
        )
    elif isinstance(error, (CommandTimeoutError, ChromeNotFoundError, ChromeStartupError)):
        _fail(str(error))
    else:
        _fail(f"{label} failed: {error}")


def _run(ctx: click.Context, command: str, label: str, main: Awaitable[T], timeout: Optional[float] = None) -> T:
    """Drive one command's coroutine to completion; any failure exits with status 1."""

    async def guarded() -> T:
        if timeout is None:
            return await main
        try:
            return await asyncio.wait_for(main, timeout)
        except asyncio.TimeoutError:
            raise CommandTimeoutError(timeout) from None

    settings: Config = ctx.obj
    try:
        result = asyncio.run(guarded())
    except Exception as e:
        increment("commands_total", labels={"command": command, "outcome": "error"})
        logger.debug("Command failed", command=command, error=str(e), exc_info=True)
        _report_error(e, settings, label)
        sys.exit(1)

    increment("commands_total", labels={"command": command, "outcome": "success"})
    return result


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default from config: WARNING)",
)
@click.option("--host", default=None, help="Remote debugging host")
@click.option("--port", default=None, type=click.IntRange(1, 65535), help="Remote debugging port")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    log_level: Optional[str],
    host: Optional[str],
    port: Optional[int],
) -> None:
    """browserlite - drive a running Chrome over its remote debugging port."""
    try:
        settings = load_config(config_path)
    except (ValidationError, yaml.YAMLError, FileNotFoundError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    if host:
        settings.browser.host = host
    if port:
        settings.browser.port = port
    if log_level:
        settings.monitoring.log_level = log_level.upper()

    configure_logging(settings.monitoring)
    ctx.obj = settings


@cli.command()
@click.option("--chrome", type=click.Path(dir_okay=False, path_type=Path), help="Chrome/Chromium executable")
@click.pass_context
def start(ctx: click.Context, chrome: Optional[Path]) -> None:
    """Launch Chrome with remote debugging enabled."""
    settings: Config = ctx.obj
    if chrome:
        settings.browser.chrome_executable = chrome

    _run(ctx, "start", "Browser start", start_chrome(settings.browser))
    click.echo(f"✓ Chrome started on :{settings.browser.port}")


@cli.command()
@click.argument("url")
@click.option("--new", "new_tab", is_flag=True, help="Open URL in a new tab")
@click.pass_context
def nav(ctx: click.Context, url: str, new_tab: bool) -> None:
    """Navigate the browser to URL."""
    settings: Config = ctx.obj

    async def main() -> Any:
        async with BrowserSession(settings.browser) as session:
            return await navigate(session, url, new_tab=new_tab, timeout=settings.browser.navigation_timeout)

    result = _run(ctx, "nav", "Navigation", main())
    click.echo(f"✓ Navigated to: {result.final_url}")
    click.echo(f"  Title: {result.title}")


@cli.command()
@click.option("--fullpage", "full_page", is_flag=True, help="Capture the full page, not just the viewport")
@click.option(
    "--output",
    "-o",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the PNG (default: system temp dir)",
)
@click.pass_context
def screenshot(ctx: click.Context, full_page: bool, directory: Optional[Path]) -> None:
    """Capture a screenshot of the active tab."""
    settings: Config = ctx.obj

    async def main() -> Path:
        async with BrowserSession(settings.browser) as session:
            return await take_screenshot(session, full_page=full_page, directory=directory)

    click.echo(str(_run(ctx, "screenshot", "Screenshot", main())))


@cli.command(name="eval")
@click.argument("code", nargs=-1, required=True)
@click.pass_context
def eval_(ctx: click.Context, code: tuple[str, ...]) -> None:
    """Evaluate JavaScript CODE in the active tab (promises are awaited)."""
    settings: Config = ctx.obj
    source = " ".join(code)
    if not source.strip():
        raise click.ClickException("JavaScript code is required")

    async def main() -> Any:
        async with BrowserSession(settings.browser) as session:
            return await PageEvaluator(session).evaluate(source)

    click.echo(format_value(_run(ctx, "eval", "Evaluation", main())))


@cli.command()
@click.argument("url")
@click.option("--json", "as_json", is_flag=True, help="Emit the result as JSON")
@click.pass_context
def content(ctx: click.Context, url: str, as_json: bool) -> None:
    """Extract the readable content of URL as Markdown."""
    settings: Config = ctx.obj
    extractor = ContentExtractor(settings.extraction)

    async def main() -> Any:
        async with BrowserSession(settings.browser) as session:
            document = await PageLoader(session, settings.browser.content_navigation_timeout).load(url)
        return await extractor.aextract(document)

    result = _run(ctx, "content", "Content extraction", main(), timeout=settings.timeouts.content)
    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(f"URL: {result.url}")
    click.echo(f"Title: {result.title}")
    click.echo("")
    click.echo(result.markdown)


@cli.command()
@click.argument("query")
@click.option("-n", "num_results", type=int, default=None, help="Number of results (default 5, max 100)")
@click.option("--content", "fetch_content", is_flag=True, help="Fetch article content for each result")
@click.pass_context
def search(ctx: click.Context, query: str, num_results: Optional[int], fetch_content: bool) -> None:
    """Search Google for QUERY and list the results."""
    settings: Config = ctx.obj
    count = clamp_results(num_results, settings.search.default_results, settings.search.max_results)
    extractor = ContentExtractor(settings.extraction)

    err_console.print(
        f'Searching for: "{escape(query)}" ({count} results){" with content" if fetch_content else ""}...'
    )

    async def main() -> Any:
        async with BrowserSession(settings.browser) as session:
            return await GoogleSearch(session, extractor, settings.search).search(query, count, fetch_content)

    results = _run(ctx, "search", "Search", main(), timeout=settings.timeouts.search)
    if fetch_content:
        for result in results:
            result.content = result.content or "(content extraction failed)"
    click.echo(format_search_results(results, include_content=fetch_content))


@cli.command()
@click.pass_context
def cookies(ctx: click.Context) -> None:
    """Display cookies of the active tab."""
    settings: Config = ctx.obj

    async def main() -> Any:
        async with BrowserSession(settings.browser) as session:
            return await list_cookies(session)

    click.echo(format_cookies(_run(ctx, "cookies", "Cookie retrieval", main())))


@cli.command()
@click.pass_context
def pick(ctx: click.Context) -> None:
    """Interactively select elements in the active tab."""
    settings: Config = ctx.obj

    async def main() -> Any:
        async with BrowserSession(settings.browser) as session:
            return await pick_elements(session)

    selection = _run(ctx, "pick", "Element picker", main())
    if selection is None:
        click.echo("Selection cancelled")
        return
    click.echo(format_element_info(selection))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
