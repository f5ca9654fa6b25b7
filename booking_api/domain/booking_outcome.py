"""Results returned by the booking engines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from booking_api.models.booking import Booking


class ReasonCode(str, Enum):
    """Why a booking or extension request was turned down."""

    GUEST_UNIT_DUPLICATE = "GUEST_UNIT_DUPLICATE"
    GUEST_ALREADY_BOOKED = "GUEST_ALREADY_BOOKED"
    UNIT_OCCUPIED = "UNIT_OCCUPIED"
    INVALID_EXTRA_NIGHTS = "INVALID_EXTRA_NIGHTS"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    EXTENSION_CONFLICT = "EXTENSION_CONFLICT"


@dataclass(frozen=True)
class Accepted:
    """The request went through; ``booking`` is the stored record."""

    booking: Booking


@dataclass(frozen=True)
class Rejected:
    """The request was refused for ``reason``."""

    reason: ReasonCode


Outcome = Union[Accepted, Rejected]
