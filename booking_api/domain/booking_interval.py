"""Half-open stay intervals.

A booking occupies the nights of ``[check_in, check_out)`` where
``check_out = check_in + number_of_nights`` days. Two stays conflict only
if each starts before the other ends, so a checkout on the same day as
the next check-in is allowed.
"""

from datetime import date, timedelta
from typing import Protocol

# Longest stay a booking may reach, including extensions (about ten years)
MAX_NIGHTS = 3650


class Stay(Protocol):
    """Anything with a check-in day and a night count."""

    check_in_date: date
    number_of_nights: int


def add_nights(day: date, nights: int) -> date:
    """Return the date ``nights`` whole days after ``day``."""
    return day + timedelta(days=nights)


def fits_calendar(day: date, nights: int) -> bool:
    """Return True if a stay of ``nights`` from ``day`` is allowed and ends on a real date."""
    return 1 <= nights <= MAX_NIGHTS and (date.max - day).days >= nights


def check_out(stay: Stay) -> date:
    """Return the (exclusive) end of a stay."""
    return add_nights(stay.check_in_date, stay.number_of_nights)


def overlaps(a: Stay, b: Stay) -> bool:
    """Return True if two stays share at least one night."""
    return a.check_in_date < check_out(b) and b.check_in_date < check_out(a)
