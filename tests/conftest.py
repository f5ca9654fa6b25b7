"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from booking_api.api.deps import get_booking_repository
from booking_api.main import app
from booking_api.models.booking import Booking
from booking_api.repositories.memory import InMemoryBookingRepository

TODAY = date(2026, 3, 10)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_booking() -> Callable[..., Booking]:
    """Build unsaved Booking records with explicit ids."""

    def _make(
        booking_id: int,
        guest_name: str,
        unit_id: str,
        check_in_date: date,
        number_of_nights: int,
    ) -> Booking:
        return Booking(
            id=booking_id,
            guest_name=guest_name,
            unit_id=unit_id,
            check_in_date=check_in_date,
            number_of_nights=number_of_nights,
        )

    return _make


@pytest.fixture
def repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def client(repository: InMemoryBookingRepository) -> Iterator[TestClient]:
    """API client backed by a fresh in-memory repository."""
    app.dependency_overrides[get_booking_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
