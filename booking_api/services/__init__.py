"""Application services."""

from booking_api.services.booking_service import BookingService, booking_service

__all__ = ["BookingService", "booking_service"]
