"""Login page object."""
from __future__ import annotations

from typing import Optional

from playwright.async_api import Locator, Page

from booker_e2e.config import settings


class LoginPage:
    """Semantic actions and queries over the login screen."""

    USERNAME_INPUT = 'input[name="username"]'
    PASSWORD_INPUT = 'input[name="password"]'
    SUBMIT_BUTTON = 'input[value="Log In"]'
    ERROR_MESSAGE = "#rightPanel .error"
    LOGGED_IN_MARKER = "text=Accounts Overview"

    def __init__(self, page: Page, base_url: Optional[str] = None) -> None:
        self.page = page
        self._base_url = base_url

    @property
    def url(self) -> str:
        return self._base_url or settings.require("ui_base_url", "UI_BASE_URL")

    async def goto(self) -> None:
        await self.page.goto(self.url)

    async def login(self, username: str, password: str) -> None:
        await self.page.fill(self.USERNAME_INPUT, username)
        await self.page.fill(self.PASSWORD_INPUT, password)
        await self.page.click(self.SUBMIT_BUTTON)

    def login_error(self) -> Locator:
        return self.page.locator(self.ERROR_MESSAGE)

    def logged_in_marker(self) -> Locator:
        """Only visible once the login went through."""
        return self.page.locator(self.LOGGED_IN_MARKER)
