"""Steps for features/login.feature."""
from __future__ import annotations

import logging
import re

from playwright.async_api import expect
from pytest_bdd import given, then, when

logger = logging.getLogger(__name__)

LOGIN_ERROR_TEXT = "The username and password could not be verified."
INVALID_USERNAME = "invalid"
INVALID_PASSWORD = "wrongpass"


@given("I open the login page")
def open_login_page(ui_session, login_page):
    ui_session.run(login_page.goto())


@when("I enter valid credentials")
def enter_valid_credentials(ui_session, login_page, ui_credentials):
    username, password = ui_credentials
    ui_session.run(login_page.login(username, password))


@when("I enter invalid credentials")
def enter_invalid_credentials(ui_session, login_page):
    ui_session.run(login_page.login(INVALID_USERNAME, INVALID_PASSWORD))


@then("I should be logged in successfully")
def should_be_logged_in(ui_session, login_page):
    ui_session.run(expect(login_page.logged_in_marker()).to_be_visible())


@then("I should see a login error message")
def should_see_login_error(ui_session, login_page):
    ui_session.run(expect(login_page.login_error()).to_contain_text(LOGIN_ERROR_TEXT))


def pytest_bdd_step_error(request, feature, scenario, step, step_func, step_func_args, exception):
    """Leave a screenshot behind when a UI step fails and SCREENSHOT_DIR is set."""
    session = step_func_args.get("ui_session")
    if session is None:
        return
    name = re.sub(r"[^a-z0-9]+", "-", f"{scenario.name}-{step.name}".lower()).strip("-")
    try:
        session.capture_screenshot(name)
    except Exception as exc:
        logger.warning("Could not capture screenshot for %r: %s", step.name, exc)
