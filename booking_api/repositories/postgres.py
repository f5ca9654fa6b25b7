"""SQLAlchemy-backed booking repository."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from datetime import date

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_api.core.exceptions import NotFoundError
from booking_api.domain.booking_feasibility import BookingCandidate
from booking_api.domain.booking_outcome import ReasonCode
from booking_api.models.booking import Booking


def _select_bookings() -> Select[tuple[Booking]]:
    """Booking query that overwrites identity-mapped objects with fresh rows.

    A request may load a booking before taking its lock; reads made after
    the lock must see what other transactions committed meanwhile.
    """
    return select(Booking).execution_options(populate_existing=True)


class SqlAlchemyBookingRepository:
    """Booking persistence on top of a request-scoped ``AsyncSession``.

    The session is committed or rolled back by ``get_db``; this class only
    flushes so generated ids are available to the caller.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_bookings_by_guest_and_unit(self, guest_name: str, unit_id: str) -> Sequence[Booking]:
        result = await self.db.execute(
            _select_bookings().where(Booking.guest_name == guest_name, Booking.unit_id == unit_id)
        )
        return list(result.scalars().all())

    async def find_bookings_by_guest(self, guest_name: str) -> Sequence[Booking]:
        result = await self.db.execute(_select_bookings().where(Booking.guest_name == guest_name))
        return list(result.scalars().all())

    async def find_bookings_by_unit_before(
        self, unit_id: str, before: date, exclude_id: int | None = None
    ) -> Sequence[Booking]:
        query = _select_bookings().where(Booking.unit_id == unit_id, Booking.check_in_date < before)
        if exclude_id is not None:
            query = query.where(Booking.id != exclude_id)
        result = await self.db.execute(query.order_by(Booking.check_in_date))
        return list(result.scalars().all())

    async def create_booking(self, candidate: BookingCandidate) -> Booking:
        booking = Booking(
            guest_name=candidate.guest_name,
            unit_id=candidate.unit_id,
            check_in_date=candidate.check_in_date,
            number_of_nights=candidate.number_of_nights,
        )
        self.db.add(booking)
        await self.db.flush()
        return booking

    async def find_booking_by_id(self, booking_id: int) -> Booking | None:
        result = await self.db.execute(_select_bookings().where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    async def update_booking_nights(self, booking_id: int, number_of_nights: int) -> Booking:
        booking = await self.find_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking", str(booking_id), code=ReasonCode.BOOKING_NOT_FOUND)
        booking.number_of_nights = number_of_nights
        await self.db.flush()
        return booking

    @asynccontextmanager
    async def serialize(self, *keys: str) -> AsyncIterator[None]:
        """Take transaction-scoped advisory locks, released on commit/rollback."""
        # Sorted so concurrent requests acquire shared keys in the same order
        for key in sorted(set(keys)):
            await self.db.execute(select(func.pg_advisory_xact_lock(func.hashtext(key))))
        yield
