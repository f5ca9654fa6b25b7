"""Booking persistence."""

from booking_api.repositories.base import BookingRepository, guest_lock_key, unit_lock_key
from booking_api.repositories.memory import InMemoryBookingRepository
from booking_api.repositories.postgres import SqlAlchemyBookingRepository

__all__ = [
    "BookingRepository",
    "InMemoryBookingRepository",
    "SqlAlchemyBookingRepository",
    "guest_lock_key",
    "unit_lock_key",
]
