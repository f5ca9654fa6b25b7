"""Booking decision rules."""

from booking_api.domain.booking_extension import (
    ExtensionWindow,
    extension_window,
    find_extension_conflict,
    parse_extra_nights,
)
from booking_api.domain.booking_feasibility import BookingCandidate, find_rejection
from booking_api.domain.booking_interval import MAX_NIGHTS, add_nights, check_out, fits_calendar, overlaps
from booking_api.domain.booking_outcome import Accepted, Outcome, ReasonCode, Rejected

__all__ = [
    "Accepted",
    "BookingCandidate",
    "ExtensionWindow",
    "MAX_NIGHTS",
    "Outcome",
    "ReasonCode",
    "Rejected",
    "add_nights",
    "check_out",
    "extension_window",
    "find_extension_conflict",
    "find_rejection",
    "fits_calendar",
    "overlaps",
    "parse_extra_nights",
]
