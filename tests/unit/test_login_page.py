"""Tests for the login page object."""
import pytest

from booker_e2e.config import settings
from booker_e2e.pages import LoginPage

from .fakes import FakePage

pytestmark = pytest.mark.asyncio


async def test_goto_opens_configured_url(monkeypatch):
    monkeypatch.setattr(settings, "ui_base_url", "http://bank.test/index.htm")
    page = FakePage()

    await LoginPage(page).goto()

    assert page.calls == [("goto", "http://bank.test/index.htm")]


async def test_goto_without_url_fails(monkeypatch):
    monkeypatch.setattr(settings, "ui_base_url", "")

    with pytest.raises(RuntimeError, match="UI_BASE_URL"):
        await LoginPage(FakePage()).goto()


async def test_explicit_base_url(monkeypatch):
    monkeypatch.setattr(settings, "ui_base_url", "")
    page = FakePage()

    await LoginPage(page, base_url="http://other.test/login").goto()

    assert page.calls == [("goto", "http://other.test/login")]


async def test_login_fills_form_and_submits():
    page = FakePage()

    await LoginPage(page).login("john", "demo")

    assert page.calls == [
        ("fill", ('input[name="username"]', "john")),
        ("fill", ('input[name="password"]', "demo")),
        ("click", 'input[value="Log In"]'),
    ]


def test_locators():
    login_page = LoginPage(FakePage())

    assert login_page.login_error() == "locator(#rightPanel .error)"
    assert login_page.logged_in_marker() == "locator(text=Accounts Overview)"
