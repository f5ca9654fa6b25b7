"""Booking service.

Runs the feasibility and extension rules against bookings read through a
``BookingRepository`` and writes the result back. Business-rule failures
come back as ``Rejected`` outcomes; repository errors propagate unchanged.

Callers are responsible for serializing conflicting requests (see
``BookingRepository.serialize``) across the read-then-write sequence.
"""

import logging
from typing import Any

from booking_api.domain.booking_extension import (
    extension_window,
    find_extension_conflict,
    parse_extra_nights,
)
from booking_api.domain.booking_feasibility import BookingCandidate, find_rejection
from booking_api.domain.booking_interval import fits_calendar
from booking_api.domain.booking_outcome import Accepted, Outcome, ReasonCode, Rejected
from booking_api.repositories.base import BookingRepository

logger = logging.getLogger(__name__)


class BookingService:
    """Service for creating and extending bookings."""

    async def evaluate_new_booking(
        self, candidate: BookingCandidate, repository: BookingRepository
    ) -> Outcome:
        """Create ``candidate`` if no guest or unit rule forbids it.

        Args:
            candidate: Requested booking
            repository: Source of existing bookings and target of the write

        Returns:
            Outcome: Accepted with the stored booking, or Rejected with a reason
        """
        existing = {}
        for batch in (
            await repository.find_bookings_by_guest_and_unit(candidate.guest_name, candidate.unit_id),
            await repository.find_bookings_by_guest(candidate.guest_name),
            await repository.find_bookings_by_unit_before(candidate.unit_id, candidate.check_out_date),
        ):
            for booking in batch:
                existing[booking.id] = booking

        reason = find_rejection(candidate, existing.values())
        if reason is not None:
            logger.info(
                f"Booking rejected: guest={candidate.guest_name!r} unit={candidate.unit_id!r} "
                f"check_in={candidate.check_in_date} reason={reason.value}"
            )
            return Rejected(reason)

        booking = await repository.create_booking(candidate)
        logger.info(
            f"Booking {booking.id} created: guest={booking.guest_name!r} unit={booking.unit_id!r} "
            f"check_in={booking.check_in_date} nights={booking.number_of_nights}"
        )
        return Accepted(booking)

    async def evaluate_extension(
        self, booking_id: int, extra_nights: Any, repository: BookingRepository
    ) -> Outcome:
        """Add ``extra_nights`` to a booking if the unit is free for them.

        Only the added nights are checked against other bookings on the unit;
        guest rules are not re-applied.

        Args:
            booking_id: Booking to extend
            extra_nights: Requested additional nights, as received
            repository: Source of bookings and target of the update

        Returns:
            Outcome: Accepted with the updated booking, or Rejected with a reason
        """
        nights = parse_extra_nights(extra_nights)
        if nights is None:
            logger.info(f"Extension of booking {booking_id} rejected: extra_nights={extra_nights!r}")
            return Rejected(ReasonCode.INVALID_EXTRA_NIGHTS)

        booking = await repository.find_booking_by_id(booking_id)
        if booking is None:
            logger.info(f"Extension rejected: booking {booking_id} not found")
            return Rejected(ReasonCode.BOOKING_NOT_FOUND)

        if not fits_calendar(booking.check_in_date, booking.number_of_nights + nights):
            logger.info(
                f"Extension of booking {booking.id} rejected: {booking.number_of_nights} + {nights} "
                f"nights exceeds the allowed stay"
            )
            return Rejected(ReasonCode.INVALID_EXTRA_NIGHTS)

        window = extension_window(booking, nights)
        others = await repository.find_bookings_by_unit_before(
            booking.unit_id, window.proposed_check_out, exclude_id=booking.id
        )
        conflict = find_extension_conflict(booking, window, others)
        if conflict is not None:
            logger.info(
                f"Extension of booking {booking.id} rejected: unit={booking.unit_id!r} "
                f"window={window.current_check_out}..{window.proposed_check_out} "
                f"conflicts with booking {conflict.id}"
            )
            return Rejected(ReasonCode.EXTENSION_CONFLICT)

        updated = await repository.update_booking_nights(booking.id, booking.number_of_nights + nights)
        logger.info(f"Booking {updated.id} extended by {nights} nights to {updated.number_of_nights}")
        return Accepted(updated)


booking_service = BookingService()
