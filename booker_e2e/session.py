"""Per-scenario browser session.

pytest-bdd steps are plain functions, while the page is driven through
Playwright's async API. Each ``UiSession`` therefore owns a private
``asyncio.Runner`` and every step pushes its coroutine through
``session.run()``. The runner is created with an explicit loop factory so
it never replaces the thread's current event loop (pytest-asyncio keeps
its own there for the API specs).
"""
from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Awaitable, Iterator, Optional, TypeVar

from playwright.async_api import Page

from booker_e2e.config import settings
from booker_e2e.playwright_client import PlaywrightClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UiSession:
    """One browser + one page, alive for exactly one scenario."""

    def __init__(self, runner: asyncio.Runner, client: PlaywrightClient) -> None:
        self._runner = runner
        self._client = client

    @property
    def page(self) -> Page:
        return self._client.page

    def run(self, awaitable: Awaitable[T]) -> T:
        return self._runner.run(_await(awaitable))

    def capture_screenshot(self, name: str, directory: Optional[str] = None) -> Optional[Path]:
        """Save a full-page PNG; returns None when no directory is configured."""
        directory = directory or settings.screenshot_dir
        if not directory:
            return None
        target = Path(directory)
        target.mkdir(parents=True, exist_ok=True)
        path = target / f"{name}.png"
        self.run(self.page.screenshot(path=str(path), full_page=True))
        logger.info("Saved screenshot %s", path)
        return path


async def _await(awaitable: Awaitable[T]) -> T:
    # Runner.run() only accepts coroutines; Playwright also hands out futures
    return await awaitable


@contextmanager
def open_ui_session(client: Optional[PlaywrightClient] = None) -> Iterator[UiSession]:
    """Launch a fresh browser, yield the session, close it unconditionally.

    A failed launch propagates to the caller. A failed close is logged and
    left alone.
    """
    client = client or PlaywrightClient()
    with asyncio.Runner(loop_factory=asyncio.new_event_loop) as runner:
        runner.run(client.connect())
        logger.debug("Opened UI session")
        try:
            yield UiSession(runner, client)
        finally:
            try:
                runner.run(client.close())
                logger.debug("Closed UI session")
            except Exception as exc:
                logger.warning("Error closing UI session: %s", exc)
