"""Database models."""

from booking_api.models.booking import Booking

__all__ = [
    "Booking",
]
