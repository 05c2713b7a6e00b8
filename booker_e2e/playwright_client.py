"""
Direct Playwright client for the UI scenarios.

Launches one browser with one context and one page. Every knob comes from
``settings`` unless passed explicitly:

    async with PlaywrightClient() as client:
        await client.page.goto("https://example.com")
"""
from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from booker_e2e.config import settings

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """Owns the Playwright driver, browser, context and page of one session."""

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
        slow_mo: Optional[int] = None,
        timeout: Optional[int] = None,
    ):
        """
        Args:
            browser_type: chromium, firefox or webkit
            headless: Run without a visible window
            slow_mo: Delay in milliseconds between operations
            timeout: Default timeout for every action, in milliseconds
        """
        self.browser_type = browser_type or settings.browser_type
        self.headless = settings.headless if headless is None else headless
        self.slow_mo = settings.slow_mo if slow_mo is None else slow_mo
        self.timeout = settings.default_timeout_ms if timeout is None else timeout

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "PlaywrightClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def connect(self) -> None:
        """Launch the browser and open a fresh context and page."""
        self._playwright = await async_playwright().start()
        launcher = getattr(self._playwright, self.browser_type)
        self._browser = await launcher.launch(headless=self.headless, slow_mo=self.slow_mo)

        self._context = await self._browser.new_context()
        self._context.set_default_timeout(self.timeout)
        self._page = await self._context.new_page()
        logger.debug(
            "Launched %s (headless=%s, slow_mo=%s)", self.browser_type, self.headless, self.slow_mo
        )

    async def close(self) -> None:
        """Close page, context and browser, then stop the driver."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page
