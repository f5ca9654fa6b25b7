"""Booking-related Pydantic schemas.

The wire format uses camelCase (``guestName``, ``unitID``...); Python code
uses the snake_case field names.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from booking_api.domain.booking_feasibility import BookingCandidate
from booking_api.domain.booking_interval import MAX_NIGHTS, fits_calendar


class BookingCreate(BaseModel):
    """Schema for creating a booking."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    guest_name: str = Field(..., alias="guestName", min_length=1, max_length=255)
    unit_id: str = Field(..., alias="unitID", min_length=1, max_length=100)
    check_in_date: date = Field(..., alias="checkInDate")
    number_of_nights: int = Field(..., alias="numberOfNights", ge=1, le=MAX_NIGHTS)

    @model_validator(mode="after")
    def validate_checkout(self) -> "BookingCreate":
        if not fits_calendar(self.check_in_date, self.number_of_nights):
            raise ValueError("checkout date is out of range")
        return self

    def to_candidate(self) -> BookingCandidate:
        return BookingCandidate(
            guest_name=self.guest_name,
            unit_id=self.unit_id,
            check_in_date=self.check_in_date,
            number_of_nights=self.number_of_nights,
        )


class BookingExtendRequest(BaseModel):
    """Schema for extending a booking.

    ``extraNights`` is accepted as sent and validated by the booking service,
    so non-numeric values get the same answer as zero or negative ones.
    """

    model_config = ConfigDict(populate_by_name=True)

    extra_nights: Any = Field(default=None, alias="extraNights")


class BookingResponse(BaseModel):
    """Schema for booking response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    guest_name: str = Field(serialization_alias="guestName")
    unit_id: str = Field(serialization_alias="unitID")
    check_in_date: date = Field(serialization_alias="checkInDate")
    number_of_nights: int = Field(serialization_alias="numberOfNights")
    check_out_date: date = Field(serialization_alias="checkOutDate")
