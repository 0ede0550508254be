"""
Launches Chrome/Chromium with remote debugging enabled.
"""

from __future__ import annotations

import asyncio
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

import httpx
import psutil
import structlog

from ..config.config import BrowserConfig
from .errors import ChromeNotFoundError, ChromeStartupError

logger = structlog.get_logger(__name__)

CHROME_CANDIDATES = (
    "/usr/bin/google-chrome",
    "/usr/bin/google-chrome-stable",
    "/usr/bin/chromium",
    "/usr/bin/chromium-browser",
    "/snap/bin/chromium",
)


def find_chrome(explicit: Optional[Path] = None, candidates: Sequence[str] = CHROME_CANDIDATES) -> Path:
    """Return the Chrome binary to launch.

    Raises:
        ChromeNotFoundError: if ``explicit`` does not exist or no candidate does
    """
    if explicit is not None:
        if not explicit.exists():
            raise ChromeNotFoundError(f"Chrome executable not found: {explicit}")
        return explicit

    for candidate in candidates:
        path = Path(candidate)
        if path.exists():
            return path

    raise ChromeNotFoundError("Chrome/Chromium not found. Please install Google Chrome or Chromium.")


def terminate_existing(port: int, timeout: float = 3.0) -> int:
    """Stop processes started with ``--remote-debugging-port=<port>``; returns how many matched."""
    flag = f"--remote-debugging-port={port}"
    victims: List[psutil.Process] = []
    for proc in psutil.process_iter(["pid", "cmdline"]):
        cmdline = proc.info.get("cmdline") or []
        if flag in cmdline:
            victims.append(proc)

    for proc in victims:
        try:
            proc.terminate()
        except psutil.NoSuchProcess:
            pass

    _, alive = psutil.wait_procs(victims, timeout=timeout)
    for proc in alive:
        try:
            proc.kill()
        except psutil.NoSuchProcess:
            pass

    if victims:
        logger.info("Terminated existing browser processes", port=port, count=len(victims))
    return len(victims)


def chrome_arguments(executable: Path, config: BrowserConfig) -> List[str]:
    return [
        str(executable),
        f"--remote-debugging-port={config.port}",
        f"--user-data-dir={config.user_data_dir}",
        "--no-first-run",
        "--no-default-browser-check",
    ]


def spawn_chrome(args: Sequence[str]) -> subprocess.Popen:
    """Start Chrome detached from this process so it outlives the command."""
    return subprocess.Popen(
        list(args),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


async def wait_for_chrome(
    endpoint: str,
    retries: int,
    interval: float,
    client: Optional[httpx.AsyncClient] = None,
) -> bool:
    """Poll ``<endpoint>/json/version`` until it answers 2xx or ``retries`` run out."""
    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=interval * 2)
    try:
        for attempt in range(1, retries + 1):
            try:
                response = await client.get(f"{endpoint}/json/version")
                if response.is_success:
                    logger.debug("Browser is ready", endpoint=endpoint, attempt=attempt)
                    return True
            except httpx.HTTPError as e:
                logger.debug("Browser not ready yet", endpoint=endpoint, attempt=attempt, error=str(e))
            await asyncio.sleep(interval)
        return False
    finally:
        if owns_client:
            await client.aclose()


async def start_chrome(config: BrowserConfig) -> subprocess.Popen:
    """
    Replace any browser on the configured port with a fresh one.

    Raises:
        ChromeNotFoundError: if no executable is available
        ChromeStartupError: if the browser does not answer in time
    """
    executable = find_chrome(config.chrome_executable)
    terminate_existing(config.port)
    config.user_data_dir.mkdir(parents=True, exist_ok=True)

    process = spawn_chrome(chrome_arguments(executable, config))
    logger.info("Launched browser", executable=str(executable), pid=process.pid, port=config.port)

    if not await wait_for_chrome(config.endpoint, config.startup_retries, config.startup_interval):
        raise ChromeStartupError(
            f"Failed to connect to Chrome after {config.startup_retries} attempts. "
            "Chrome may have crashed or failed to start."
        )
    return process
