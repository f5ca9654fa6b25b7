"""Custom application exceptions."""

from fastapi import HTTPException, status

from booking_api.domain.booking_outcome import ReasonCode


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
        code: ReasonCode | None = None,
    ) -> None:
        self.code = code
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(
        self,
        resource: str = "Resource",
        identifier: str | None = None,
        code: ReasonCode | None = None,
    ) -> None:
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            code=code,
        )


class BookingRejected(AppException):
    """A new booking failed a guest or unit rule."""

    MESSAGES = {
        ReasonCode.GUEST_UNIT_DUPLICATE: "The given guest name cannot book the same unit multiple times",
        ReasonCode.GUEST_ALREADY_BOOKED: "The same guest cannot be in multiple units at the same time",
        ReasonCode.UNIT_OCCUPIED: "For the given check-in date, the unit is already occupied",
    }

    def __init__(self, reason: ReasonCode) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=self.MESSAGES.get(reason, "Booking not possible"),
            code=reason,
        )


class InvalidExtraNights(AppException):
    """Extension requested with a non-positive or non-numeric night count."""

    def __init__(self, detail: str = "Extra nights should be a valid number") -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            code=ReasonCode.INVALID_EXTRA_NIGHTS,
        )


class ExtensionConflict(AppException):
    """The unit is taken during the nights an extension would add."""

    def __init__(self, detail: str = "Extension not possible; unit is taken in that period") -> None:
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            code=ReasonCode.EXTENSION_CONFLICT,
        )


def exception_for_rejection(reason: ReasonCode) -> AppException:
    """Map a rejection reason to the exception the API responds with."""
    if reason is ReasonCode.INVALID_EXTRA_NIGHTS:
        return InvalidExtraNights()
    if reason is ReasonCode.BOOKING_NOT_FOUND:
        return NotFoundError("Booking", code=reason)
    if reason is ReasonCode.EXTENSION_CONFLICT:
        return ExtensionConflict()
    return BookingRejected(reason)
