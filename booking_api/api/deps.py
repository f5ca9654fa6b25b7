"""API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from booking_api.config import settings
from booking_api.database import get_db
from booking_api.repositories.base import BookingRepository
from booking_api.repositories.memory import InMemoryBookingRepository
from booking_api.repositories.postgres import SqlAlchemyBookingRepository

# Process-wide store for storage_backend=memory
memory_repository = InMemoryBookingRepository()


async def get_booking_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BookingRepository:
    """Get the booking repository for the configured storage backend.

    The session is opened lazily, so the memory backend never connects.
    """
    if settings.storage_backend == "memory":
        return memory_repository
    return SqlAlchemyBookingRepository(db)
