"""Booking endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from booking_api.api.deps import get_booking_repository
from booking_api.core.exceptions import NotFoundError, exception_for_rejection
from booking_api.domain.booking_extension import parse_extra_nights
from booking_api.domain.booking_outcome import Outcome, ReasonCode, Rejected
from booking_api.repositories.base import BookingRepository, guest_lock_key, unit_lock_key
from booking_api.schemas.booking import BookingCreate, BookingExtendRequest, BookingResponse
from booking_api.services.booking_service import booking_service

router = APIRouter()


def _to_response(outcome: Outcome) -> BookingResponse:
    """Raise the mapped API error for a rejection, else serialize the booking."""
    if isinstance(outcome, Rejected):
        raise exception_for_rejection(outcome.reason)
    return BookingResponse.model_validate(outcome.booking)


@router.post("", response_model=BookingResponse)
async def create_booking(
    booking_data: BookingCreate,
    repository: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> BookingResponse:
    """Create a new booking."""
    candidate = booking_data.to_candidate()
    async with repository.serialize(unit_lock_key(candidate.unit_id), guest_lock_key(candidate.guest_name)):
        outcome = await booking_service.evaluate_new_booking(candidate, repository)
    return _to_response(outcome)


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: int,
    repository: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> BookingResponse:
    """Get a booking by ID."""
    booking = await repository.find_booking_by_id(booking_id)
    if booking is None:
        raise NotFoundError("Booking", code=ReasonCode.BOOKING_NOT_FOUND)
    return BookingResponse.model_validate(booking)


@router.post("/{booking_id}/extend", response_model=BookingResponse)
async def extend_booking(
    booking_id: int,
    request: BookingExtendRequest,
    repository: Annotated[BookingRepository, Depends(get_booking_repository)],
) -> BookingResponse:
    """Extend a booking by a number of extra nights."""
    # Lock the unit only when the service will get as far as reading it
    lock_keys: list[str] = []
    if parse_extra_nights(request.extra_nights) is not None:
        existing = await repository.find_booking_by_id(booking_id)
        if existing is not None:
            lock_keys.append(unit_lock_key(existing.unit_id))

    async with repository.serialize(*lock_keys):
        outcome = await booking_service.evaluate_extension(booking_id, request.extra_nights, repository)
    return _to_response(outcome)
