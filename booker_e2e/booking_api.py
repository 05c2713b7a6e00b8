"""Thin wrapper over the ``/booking`` endpoints.

Every call returns the raw ``httpx.Response``; status codes are for the
specs to judge.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx


def booking_ids(response: httpx.Response) -> List[int]:
    """Extract the ids from a ``GET /booking`` listing."""
    return [item["bookingid"] for item in response.json()]


class BookingApi:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def list_ids(
        self,
        *,
        firstname: Optional[str] = None,
        lastname: Optional[str] = None,
        checkin: Optional[str] = None,
        checkout: Optional[str] = None,
    ) -> httpx.Response:
        filters = {
            "firstname": firstname,
            "lastname": lastname,
            "checkin": checkin,
            "checkout": checkout,
        }
        params = {key: value for key, value in filters.items() if value is not None}
        return await self._client.get("/booking", params=params)

    async def get(self, booking_id: int) -> httpx.Response:
        return await self._client.get(f"/booking/{booking_id}")

    async def create(self, payload: Dict[str, Any]) -> httpx.Response:
        return await self._client.post("/booking", json=payload)

    async def update(self, booking_id: int, payload: Dict[str, Any]) -> httpx.Response:
        """Replace the whole booking (PUT, token required)."""
        return await self._client.put(f"/booking/{booking_id}", json=payload)

    async def partial_update(self, booking_id: int, payload: Dict[str, Any]) -> httpx.Response:
        """Merge the given fields into the booking (PATCH)."""
        return await self._client.patch(f"/booking/{booking_id}", json=payload)

    async def delete(self, booking_id: int) -> httpx.Response:
        return await self._client.delete(f"/booking/{booking_id}")
