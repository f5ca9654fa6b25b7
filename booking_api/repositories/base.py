"""Persistence interface the booking service depends on."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager
from datetime import date
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from booking_api.domain.booking_feasibility import BookingCandidate
    from booking_api.models.booking import Booking


class BookingRepository(Protocol):
    """Reads and writes bookings for one unit of work."""

    async def find_bookings_by_guest_and_unit(self, guest_name: str, unit_id: str) -> Sequence[Booking]:
        ...

    async def find_bookings_by_guest(self, guest_name: str) -> Sequence[Booking]:
        ...

    async def find_bookings_by_unit_before(
        self, unit_id: str, before: date, exclude_id: int | None = None
    ) -> Sequence[Booking]:
        """Bookings on ``unit_id`` whose check-in is strictly before ``before``."""
        ...

    async def create_booking(self, candidate: BookingCandidate) -> Booking:
        ...

    async def find_booking_by_id(self, booking_id: int) -> Booking | None:
        ...

    async def update_booking_nights(self, booking_id: int, number_of_nights: int) -> Booking:
        ...

    def serialize(self, *keys: str) -> AbstractAsyncContextManager[None]:
        """Hold exclusive locks on ``keys`` until the unit of work ends."""
        ...


def unit_lock_key(unit_id: str) -> str:
    return f"unit:{unit_id}"


def guest_lock_key(guest_name: str) -> str:
    return f"guest:{guest_name}"
