"""Tests for the booking service against the in-memory repository."""

import itertools
from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest

from booking_api.domain.booking_feasibility import BookingCandidate
from booking_api.domain.booking_interval import MAX_NIGHTS, overlaps
from booking_api.domain.booking_outcome import Accepted, ReasonCode, Rejected
from booking_api.services.booking_service import booking_service


def candidate(guest: str, unit: str, check_in, nights: int = 5) -> BookingCandidate:
    return BookingCandidate(guest_name=guest, unit_id=unit, check_in_date=check_in, number_of_nights=nights)


class TestEvaluateNewBooking:
    @pytest.mark.asyncio
    async def test_accepts_and_stores_fresh_booking(self, repository, today):
        outcome = await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        assert isinstance(outcome, Accepted)
        assert outcome.booking.id == 1
        assert outcome.booking.number_of_nights == 5
        assert repository.all() == [outcome.booking]

    @pytest.mark.asyncio
    async def test_same_guest_other_unit_rejected(self, repository, today):
        await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        outcome = await booking_service.evaluate_new_booking(candidate("GuestA", "2", today), repository)

        assert outcome == Rejected(ReasonCode.GUEST_ALREADY_BOOKED)
        assert len(repository.all()) == 1

    @pytest.mark.asyncio
    async def test_same_guest_same_unit_rejected(self, repository, today):
        await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        outcome = await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        assert outcome == Rejected(ReasonCode.GUEST_UNIT_DUPLICATE)

    @pytest.mark.asyncio
    async def test_other_guest_same_day_rejected(self, repository, today):
        await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        outcome = await booking_service.evaluate_new_booking(candidate("GuestB", "1", today), repository)

        assert outcome == Rejected(ReasonCode.UNIT_OCCUPIED)

    @pytest.mark.asyncio
    async def test_back_to_back_accepted(self, repository, today):
        await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        outcome = await booking_service.evaluate_new_booking(
            candidate("GuestB", "1", today + timedelta(days=5), 2), repository
        )

        assert isinstance(outcome, Accepted)

    @pytest.mark.asyncio
    async def test_accepted_bookings_never_overlap(self, repository, today):
        guests = (f"Guest{n}" for n in itertools.count())
        for offset, nights in itertools.product(range(0, 20, 3), (1, 2, 4)):
            await booking_service.evaluate_new_booking(
                candidate(next(guests), "1", today + timedelta(days=offset), nights), repository
            )

        stored = repository.all()
        assert len(stored) > 1
        for a, b in itertools.combinations(stored, 2):
            assert not overlaps(a, b)

    @pytest.mark.asyncio
    async def test_persistence_failure_propagates(self, today):
        repository = AsyncMock()
        repository.find_bookings_by_guest_and_unit.side_effect = ConnectionError("database down")

        with pytest.raises(ConnectionError):
            await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)
        repository.create_booking.assert_not_awaited()


class TestEvaluateExtension:
    @pytest.mark.asyncio
    async def test_extends_when_unit_is_free(self, repository, today):
        created = await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        outcome = await booking_service.evaluate_extension(created.booking.id, 2, repository)

        assert isinstance(outcome, Accepted)
        assert outcome.booking.id == created.booking.id
        assert outcome.booking.number_of_nights == 7

    @pytest.mark.asyncio
    async def test_blocked_by_booking_at_checkout(self, repository, today):
        created = await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)
        await booking_service.evaluate_new_booking(
            candidate("GuestC", "1", today + timedelta(days=5), 2), repository
        )

        outcome = await booking_service.evaluate_extension(created.booking.id, 1, repository)

        assert outcome == Rejected(ReasonCode.EXTENSION_CONFLICT)
        assert (await repository.find_booking_by_id(created.booking.id)).number_of_nights == 5

    @pytest.mark.asyncio
    async def test_conflict_check_is_repeatable(self, repository, today):
        created = await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)
        await booking_service.evaluate_new_booking(
            candidate("GuestC", "1", today + timedelta(days=5), 2), repository
        )

        first = await booking_service.evaluate_extension(created.booking.id, 1, repository)
        second = await booking_service.evaluate_extension(created.booking.id, 1, repository)

        assert first == second == Rejected(ReasonCode.EXTENSION_CONFLICT)

    @pytest.mark.asyncio
    async def test_guest_rules_not_reapplied(self, repository, today):
        created = await booking_service.evaluate_new_booking(candidate("GuestA", "1", today), repository)

        outcome = await booking_service.evaluate_extension(created.booking.id, "3", repository)

        assert isinstance(outcome, Accepted)
        assert outcome.booking.number_of_nights == 8

    @pytest.mark.asyncio
    async def test_unknown_booking(self, repository):
        outcome = await booking_service.evaluate_extension(999999, 2, repository)

        assert outcome == Rejected(ReasonCode.BOOKING_NOT_FOUND)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extra_nights", [0, -2, "two", None])
    async def test_invalid_nights_rejected_before_any_read(self, extra_nights):
        repository = AsyncMock()

        outcome = await booking_service.evaluate_extension(1, extra_nights, repository)

        assert outcome == Rejected(ReasonCode.INVALID_EXTRA_NIGHTS)
        repository.find_booking_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_total_stay_above_limit_rejected(self, repository, today):
        created = await booking_service.evaluate_new_booking(
            candidate("GuestA", "1", today, MAX_NIGHTS - 1), repository
        )

        outcome = await booking_service.evaluate_extension(created.booking.id, 2, repository)

        assert outcome == Rejected(ReasonCode.INVALID_EXTRA_NIGHTS)
        assert (await repository.find_booking_by_id(created.booking.id)).number_of_nights == MAX_NIGHTS - 1

    @pytest.mark.asyncio
    async def test_extension_past_last_calendar_day_rejected(self, repository):
        created = await booking_service.evaluate_new_booking(
            candidate("GuestA", "1", date(9999, 12, 20), 5), repository
        )

        outcome = await booking_service.evaluate_extension(created.booking.id, 10, repository)

        assert outcome == Rejected(ReasonCode.INVALID_EXTRA_NIGHTS)
