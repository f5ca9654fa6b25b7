"""Feasibility rules for new bookings.

Rules are evaluated in a fixed order and the first one that fails decides
the rejection reason:

1. the guest already booked this unit        -> GUEST_UNIT_DUPLICATE
2. the guest already holds any booking       -> GUEST_ALREADY_BOOKED
3. the unit has a stay starting the same day -> UNIT_OCCUPIED
4. the unit has an overlapping stay          -> UNIT_OCCUPIED

Rule 2 covers every case rule 1 does; rule 1 runs first so a repeat booking
of the same unit reports the more specific reason.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from booking_api.domain.booking_interval import check_out, overlaps
from booking_api.domain.booking_outcome import ReasonCode

if TYPE_CHECKING:
    from booking_api.models.booking import Booking


@dataclass(frozen=True)
class BookingCandidate:
    """A requested booking that has not been stored yet."""

    guest_name: str
    unit_id: str
    check_in_date: date
    number_of_nights: int

    @property
    def check_out_date(self) -> date:
        return check_out(self)


def find_rejection(
    candidate: BookingCandidate, existing_bookings: Iterable[Booking]
) -> ReasonCode | None:
    """Return the reason ``candidate`` cannot be booked, or None if it can.

    Args:
        candidate: The requested booking
        existing_bookings: Bookings on record; may include unrelated units
            and guests, they are filtered here

    Returns:
        ReasonCode | None: First failing rule, None when all rules pass
    """
    existing = list(existing_bookings)
    same_guest = [b for b in existing if b.guest_name == candidate.guest_name]
    same_unit = [b for b in existing if b.unit_id == candidate.unit_id]

    if any(b.unit_id == candidate.unit_id for b in same_guest):
        return ReasonCode.GUEST_UNIT_DUPLICATE

    if same_guest:
        return ReasonCode.GUEST_ALREADY_BOOKED

    if any(b.check_in_date == candidate.check_in_date for b in same_unit):
        return ReasonCode.UNIT_OCCUPIED

    candidate_check_out = candidate.check_out_date
    for other in same_unit:
        if other.check_in_date < candidate_check_out and overlaps(candidate, other):
            return ReasonCode.UNIT_OCCUPIED

    return None
