"""Core exceptions and middleware."""

from booking_api.core.exceptions import (
    AppException,
    BookingRejected,
    ExtensionConflict,
    InvalidExtraNights,
    NotFoundError,
    exception_for_rejection,
)

__all__ = [
    "AppException",
    "BookingRejected",
    "ExtensionConflict",
    "InvalidExtraNights",
    "NotFoundError",
    "exception_for_rejection",
]
