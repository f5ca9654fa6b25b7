"""Pydantic request/response schemas."""

from booking_api.schemas.booking import BookingCreate, BookingExtendRequest, BookingResponse

__all__ = ["BookingCreate", "BookingExtendRequest", "BookingResponse"]
