"""HTTP clients for the booking REST service.

``get_client()`` hands out one unauthenticated client for the whole run;
``new_client()`` builds independent ones (token-bearing or anonymous) for
suites that need their own.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from booker_e2e.config import settings

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

_client: Optional[httpx.AsyncClient] = None


async def _log_request(request: httpx.Request) -> None:
    logger.debug("-> %s %s", request.method, request.url)


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug("<- %s %s %s", response.status_code, request.method, request.url)


def new_client(
    token: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create a client for the booking service.

    Args:
        token: Auth token from ``POST /auth``; sent as the ``token`` cookie
        base_url: Service root (defaults to ``API_BASE_URL``)
        transport: Custom transport, e.g. ``httpx.MockTransport``
    """
    base_url = base_url or settings.require("api_base_url", "API_BASE_URL")
    headers = dict(JSON_HEADERS)
    if token:
        headers["Cookie"] = f"token={token}"

    return httpx.AsyncClient(
        base_url=base_url,
        headers=headers,
        timeout=settings.api_timeout,
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )


def get_client() -> httpx.AsyncClient:
    """Return the shared unauthenticated client, creating it on first use."""
    global _client
    if _client is None:
        _client = new_client()
        logger.info("Created shared API client for %s", _client.base_url)
    return _client


async def close_client() -> None:
    """Close the shared client; the next ``get_client()`` builds a new one."""
    global _client
    if _client is not None:
        client, _client = _client, None
        await client.aclose()
        logger.info("Closed shared API client")


async def authenticate(client: httpx.AsyncClient, username: str, password: str) -> httpx.Response:
    return await client.post("/auth", json={"username": username, "password": password})


async def fetch_token(client: httpx.AsyncClient, username: str, password: str) -> str:
    """Log in and return the token, failing hard when the service refuses."""
    response = await authenticate(client, username, password)
    body = response.json()
    token = body.get("token") if isinstance(body, dict) else None
    if not token:
        raise RuntimeError(
            f"Authentication as {username!r} failed "
            f"(HTTP {response.status_code}): {body}"
        )
    logger.info("Obtained auth token for %s", username)
    return token
