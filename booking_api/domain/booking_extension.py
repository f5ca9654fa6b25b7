"""Extension rules for existing bookings.

An extension only has to be checked for the nights it adds. The original
stay was validated when it was created, so conflicts are looked for in the
window ``[current_check_out, proposed_check_out)`` alone.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from booking_api.domain.booking_interval import MAX_NIGHTS, add_nights, check_out

if TYPE_CHECKING:
    from booking_api.models.booking import Booking


@dataclass(frozen=True)
class ExtensionWindow:
    """Nights added by an extension: ``[current_check_out, proposed_check_out)``."""

    current_check_out: date
    proposed_check_out: date


def parse_extra_nights(raw: Any) -> int | None:
    """Parse a requested extra-night count.

    Accepts ints, integral floats and numeric strings. Returns None for
    anything that is not a whole number between 1 and ``MAX_NIGHTS``.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value) or not 0 < value <= MAX_NIGHTS or not value.is_integer():
        return None
    return int(value)


def extension_window(booking: Booking, extra_nights: int) -> ExtensionWindow:
    """Compute the window an extension of ``extra_nights`` would add."""
    current = check_out(booking)
    return ExtensionWindow(
        current_check_out=current,
        proposed_check_out=add_nights(current, extra_nights),
    )


def find_extension_conflict(
    booking: Booking, window: ExtensionWindow, others: Iterable[Booking]
) -> Booking | None:
    """Return the first booking that intrudes into the extension window.

    Bookings on other units, the booking itself, and bookings starting on or
    after the proposed checkout are ignored.
    """
    for other in others:
        if other.unit_id != booking.unit_id or other.id == booking.id:
            continue
        if other.check_in_date >= window.proposed_check_out:
            continue
        if window.current_check_out < check_out(other) and other.check_in_date < window.proposed_check_out:
            return other
    return None
