"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates the bookings table.
"""

from typing import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the bookings table."""

    # ==================== BOOKINGS ====================
    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("guest_name", sa.String(255), nullable=False, index=True),
        sa.Column("unit_id", sa.String(100), nullable=False, index=True),
        sa.Column("check_in_date", sa.Date, nullable=False, index=True),
        sa.Column("number_of_nights", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("number_of_nights >= 1", name="ck_bookings_positive_nights"),
    )
    op.create_index("ix_bookings_unit_check_in", "bookings", ["unit_id", "check_in_date"])


def downgrade() -> None:
    """Drop the bookings table."""
    op.drop_index("ix_bookings_unit_check_in", table_name="bookings")
    op.drop_table("bookings")
