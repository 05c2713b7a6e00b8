"""Booking records as sent to and returned by the booking service."""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class BookingDates:
    checkin: str
    checkout: str


@dataclass(frozen=True)
class Booking:
    firstname: str
    lastname: str
    totalprice: int
    depositpaid: bool
    bookingdates: BookingDates
    additionalneeds: str

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Booking":
        dates = payload["bookingdates"]
        return cls(
            firstname=payload["firstname"],
            lastname=payload["lastname"],
            totalprice=payload["totalprice"],
            depositpaid=payload["depositpaid"],
            bookingdates=BookingDates(checkin=dates["checkin"], checkout=dates["checkout"]),
            additionalneeds=payload.get("additionalneeds", ""),
        )

    def matches(self, other: "Booking", ignore_case: bool = False) -> bool:
        """Compare field by field; ``ignore_case`` relaxes the text fields."""
        if not ignore_case:
            return self == other

        def fold(value: str) -> str:
            return value.casefold()

        return (
            fold(self.firstname) == fold(other.firstname)
            and fold(self.lastname) == fold(other.lastname)
            and fold(self.additionalneeds) == fold(other.additionalneeds)
            and self.totalprice == other.totalprice
            and self.depositpaid == other.depositpaid
            and self.bookingdates == other.bookingdates
        )


DEFAULT_BOOKING = Booking(
    firstname="TestUser",
    lastname="Automation",
    totalprice=150,
    depositpaid=True,
    bookingdates=BookingDates(checkin="2023-12-01", checkout="2023-12-10"),
    additionalneeds="Wi-Fi",
)


def make_booking(**overrides: Any) -> Booking:
    """Derive a booking from ``DEFAULT_BOOKING``.

    ``checkin``/``checkout`` may be given directly instead of a whole
    ``bookingdates`` value.
    """
    checkin = overrides.pop("checkin", None)
    checkout = overrides.pop("checkout", None)
    booking = replace(DEFAULT_BOOKING, **overrides)
    if checkin or checkout:
        dates = replace(
            booking.bookingdates,
            checkin=checkin or booking.bookingdates.checkin,
            checkout=checkout or booking.bookingdates.checkout,
        )
        booking = replace(booking, bookingdates=dates)
    return booking
