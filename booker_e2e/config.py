"""Shared configuration for the UI scenarios and API specs.

Values are read once per process from the environment, falling back to
``.env`` and ``.env.defaults`` in the repository root:

- ``API_BASE_URL``: root of the booking REST service
- ``UI_BASE_URL``: login page of the web application
- ``TEST_USER_USERNAME`` / ``TEST_USER_PASSWORD``: UI login credentials
- ``HEADLESS``: ``"false"`` opens a visible browser, anything else is headless
"""
from __future__ import annotations

import logging
import os

from booker_e2e.env_defaults import get_env_default

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def _env(key: str, default: str = "") -> str:
    value = os.getenv(key)
    if value is None:
        value = get_env_default(key)
    return default if value is None else value


def _env_int(key: str, default: int) -> int:
    raw = _env(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}") from None


class SuiteConfig:
    """Process-wide settings for the suite."""

    def __init__(self) -> None:
        self.api_base_url: str = _env("API_BASE_URL")
        self.ui_base_url: str = _env("UI_BASE_URL")
        self.username: str = _env("TEST_USER_USERNAME")
        self.password: str = _env("TEST_USER_PASSWORD")

        self.headless: bool = _env("HEADLESS") != "false"
        self.browser_type: str = _env("BROWSER", "chromium").lower()
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise RuntimeError(
                f"BROWSER must be one of {', '.join(SUPPORTED_BROWSERS)}, got {self.browser_type!r}"
            )
        # Slow down visible runs so a human can follow along
        self.slow_mo: int = _env_int("SLOW_MO_MS", 0 if self.headless else 100)
        self.default_timeout_ms: int = _env_int("DEFAULT_TIMEOUT_MS", 30_000)

        self.api_timeout: float = float(_env_int("API_TIMEOUT", 30))
        self.api_admin_username: str = _env("API_ADMIN_USERNAME", "admin")
        self.api_admin_password: str = _env("API_ADMIN_PASSWORD", "password123")

        self.screenshot_dir: str | None = _env("SCREENSHOT_DIR") or None
        self.run_live: bool = _env("E2E_LIVE").lower() in {"1", "true"}

        logger.debug(
            "[CONFIG] api=%s ui=%s browser=%s headless=%s",
            self.api_base_url or "<unset>",
            self.ui_base_url or "<unset>",
            self.browser_type,
            self.headless,
        )

    def require(self, attribute: str, env_key: str) -> str:
        """Return a configured value or fail with the variable to set."""
        value = getattr(self, attribute)
        if not value:
            raise RuntimeError(
                f"{env_key} is not set.\n"
                f"Export it or add it to .env in the repository root."
            )
        return value


# Singleton instance - initialized on first import
settings = SuiteConfig()
