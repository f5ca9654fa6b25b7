"""In-process booking repository.

Used when ``storage_backend`` is ``memory`` and as the test double for the
Postgres repository. Bookings live for the lifetime of the instance.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import AsyncIterator, Sequence
from contextlib import AsyncExitStack, asynccontextmanager
from datetime import date

from booking_api.core.exceptions import NotFoundError
from booking_api.domain.booking_feasibility import BookingCandidate
from booking_api.domain.booking_outcome import ReasonCode
from booking_api.models.booking import Booking


class InMemoryBookingRepository:
    """Dict-backed booking store with sequential ids."""

    def __init__(self) -> None:
        self._bookings: dict[int, Booking] = {}
        self._ids = itertools.count(1)
        self._locks: dict[str, asyncio.Lock] = {}
        # Holders plus waiters per key; a lock is dropped when this reaches zero
        self._lock_users: dict[str, int] = {}

    def all(self) -> list[Booking]:
        """Every stored booking, in id order."""
        return [self._bookings[k] for k in sorted(self._bookings)]

    def clear(self) -> None:
        """Drop every booking and restart ids at 1."""
        self._bookings.clear()
        self._ids = itertools.count(1)

    async def find_bookings_by_guest_and_unit(self, guest_name: str, unit_id: str) -> Sequence[Booking]:
        return [b for b in self.all() if b.guest_name == guest_name and b.unit_id == unit_id]

    async def find_bookings_by_guest(self, guest_name: str) -> Sequence[Booking]:
        return [b for b in self.all() if b.guest_name == guest_name]

    async def find_bookings_by_unit_before(
        self, unit_id: str, before: date, exclude_id: int | None = None
    ) -> Sequence[Booking]:
        matches = [
            b
            for b in self.all()
            if b.unit_id == unit_id and b.check_in_date < before and b.id != exclude_id
        ]
        return sorted(matches, key=lambda b: b.check_in_date)

    async def create_booking(self, candidate: BookingCandidate) -> Booking:
        booking = Booking(
            id=next(self._ids),
            guest_name=candidate.guest_name,
            unit_id=candidate.unit_id,
            check_in_date=candidate.check_in_date,
            number_of_nights=candidate.number_of_nights,
        )
        self._bookings[booking.id] = booking
        return booking

    async def find_booking_by_id(self, booking_id: int) -> Booking | None:
        return self._bookings.get(booking_id)

    async def update_booking_nights(self, booking_id: int, number_of_nights: int) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id), code=ReasonCode.BOOKING_NOT_FOUND)
        booking.number_of_nights = number_of_nights
        return booking

    @asynccontextmanager
    async def _hold(self, key: str) -> AsyncIterator[None]:
        """Acquire the lock for ``key``, creating it on first use and dropping it after last use."""
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[key] -= 1
            if not self._lock_users[key]:
                del self._lock_users[key]
                del self._locks[key]

    @asynccontextmanager
    async def serialize(self, *keys: str) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            for key in sorted(set(keys)):
                await stack.enter_async_context(self._hold(key))
            yield
