"""Tests for new-booking feasibility rules."""

from datetime import timedelta

from booking_api.domain.booking_feasibility import BookingCandidate, find_rejection
from booking_api.domain.booking_outcome import ReasonCode


def candidate(guest: str, unit: str, check_in, nights: int = 5) -> BookingCandidate:
    return BookingCandidate(guest_name=guest, unit_id=unit, check_in_date=check_in, number_of_nights=nights)


class TestGuestRules:
    def test_same_guest_same_unit_is_duplicate(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        reason = find_rejection(candidate("GuestA", "1", today + timedelta(days=30)), existing)

        assert reason is ReasonCode.GUEST_UNIT_DUPLICATE

    def test_duplicate_wins_over_occupied(self, today, make_booking):
        """Same guest, same unit and same dates reports the guest rule first."""
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        assert find_rejection(candidate("GuestA", "1", today), existing) is ReasonCode.GUEST_UNIT_DUPLICATE

    def test_same_guest_other_unit_is_already_booked(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        reason = find_rejection(candidate("GuestA", "2", today), existing)

        assert reason is ReasonCode.GUEST_ALREADY_BOOKED

    def test_guest_rule_ignores_dates(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today - timedelta(days=365), 1)]

        reason = find_rejection(candidate("GuestA", "9", today + timedelta(days=365)), existing)

        assert reason is ReasonCode.GUEST_ALREADY_BOOKED

    def test_guest_rule_beats_unit_rule(self, today, make_booking):
        existing = [
            make_booking(1, "GuestA", "2", today, 5),
            make_booking(2, "GuestB", "1", today, 5),
        ]

        assert find_rejection(candidate("GuestA", "1", today), existing) is ReasonCode.GUEST_ALREADY_BOOKED


class TestUnitRules:
    def test_same_check_in_is_occupied(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        assert find_rejection(candidate("GuestB", "1", today), existing) is ReasonCode.UNIT_OCCUPIED

    def test_same_check_in_occupied_even_for_one_night(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 1)]

        assert find_rejection(candidate("GuestB", "1", today, 1), existing) is ReasonCode.UNIT_OCCUPIED

    def test_starting_inside_existing_stay_is_occupied(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        reason = find_rejection(candidate("GuestB", "1", today + timedelta(days=1)), existing)

        assert reason is ReasonCode.UNIT_OCCUPIED

    def test_ending_inside_existing_stay_is_occupied(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        reason = find_rejection(candidate("GuestB", "1", today - timedelta(days=2), 3), existing)

        assert reason is ReasonCode.UNIT_OCCUPIED

    def test_back_to_back_is_accepted(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        assert find_rejection(candidate("GuestB", "1", today + timedelta(days=5), 2), existing) is None

    def test_ending_at_existing_check_in_is_accepted(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "1", today, 5)]

        assert find_rejection(candidate("GuestB", "1", today - timedelta(days=3), 3), existing) is None

    def test_other_units_are_ignored(self, today, make_booking):
        existing = [make_booking(1, "GuestA", "2", today, 5)]

        assert find_rejection(candidate("GuestB", "1", today), existing) is None


def test_no_existing_bookings_is_accepted(today):
    assert find_rejection(candidate("GuestA", "1", today), []) is None
