"""Booking database model."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from sqlalchemy import CheckConstraint, Date, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from booking_api.database import Base


class Booking(Base):
    """A guest's reservation of one unit for a run of whole nights."""

    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("number_of_nights >= 1", name="ck_bookings_positive_nights"),
        Index("ix_bookings_unit_check_in", "unit_id", "check_in_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    guest_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    unit_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    # Dates (whole days; checkout is derived)
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    number_of_nights: Mapped[int] = mapped_column(Integer, nullable=False)

    # Timestamps
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    @property
    def check_out_date(self) -> date:
        """Day the guest leaves; not itself an occupied night."""
        return self.check_in_date + timedelta(days=self.number_of_nights)

    def __repr__(self) -> str:
        return (
            f"<Booking id={self.id} guest={self.guest_name!r} unit={self.unit_id!r} "
            f"check_in={self.check_in_date} nights={self.number_of_nights}>"
        )
