"""pytest fixtures shared by the API specs and the UI scenarios.

Registered as a plugin from the root ``conftest.py``. Async fixtures run on
the session-wide event loop so clients created here survive across tests.
"""
from __future__ import annotations

import logging

import pytest
import pytest_asyncio

from booker_e2e.api_client import close_client, fetch_token, get_client, new_client
from booker_e2e.booking_api import BookingApi
from booker_e2e.bookings import DEFAULT_BOOKING
from booker_e2e.config import settings
from booker_e2e.pages.login_page import LoginPage
from booker_e2e.session import open_ui_session

logger = logging.getLogger(__name__)


# ============================================================================
# API fixtures
# ============================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def api_client():
    """The shared unauthenticated client, released when the run ends."""
    yield get_client()
    await close_client()


@pytest_asyncio.fixture(scope="module", loop_scope="session")
async def auth_token():
    """Token for the service's admin user, fetched once per module."""
    async with new_client() as client:
        return await fetch_token(
            client, settings.api_admin_username, settings.api_admin_password
        )


@pytest_asyncio.fixture(scope="module", loop_scope="session")
async def booking_client(auth_token):
    async with new_client(token=auth_token) as client:
        yield client


@pytest.fixture(scope="module")
def booking_api(booking_client):
    return BookingApi(booking_client)


@pytest_asyncio.fixture(loop_scope="session")
async def unauth_booking_api():
    """A fresh client without the token cookie."""
    async with new_client() as client:
        yield BookingApi(client)


@pytest_asyncio.fixture(loop_scope="session")
async def created_booking(booking_api):
    """Create the default booking before the test, delete it afterwards.

    Yields the new booking id. Cleanup must answer 201; anything else fails
    the test in teardown.
    """
    response = await booking_api.create(DEFAULT_BOOKING.to_payload())
    assert response.status_code == 200, \
        f"Creating the fixture booking failed: {response.status_code} {response.text}"
    booking_id = response.json()["bookingid"]
    logger.info("Created booking %s", booking_id)

    yield booking_id

    cleanup = await booking_api.delete(booking_id)
    assert cleanup.status_code == 201, \
        f"Deleting booking {booking_id} returned {cleanup.status_code}"
    logger.info("Deleted booking %s", booking_id)


# ============================================================================
# UI fixtures
# ============================================================================

@pytest.fixture()
def ui_session():
    """Fresh browser and page for one scenario, closed afterwards."""
    with open_ui_session() as session:
        yield session


@pytest.fixture()
def login_page(ui_session):
    return LoginPage(ui_session.page)


@pytest.fixture(scope="session")
def ui_credentials():
    """Credentials of the registered UI test user."""
    return (
        settings.require("username", "TEST_USER_USERNAME"),
        settings.require("password", "TEST_USER_PASSWORD"),
    )
