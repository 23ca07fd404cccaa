"""
Overlap Detection

Half-open interval arithmetic shared by the slot generator and the
commit-time conflict check in the booking store.
"""

import math
from datetime import date, datetime, time
from typing import Iterable, Optional

from salon_scheduler.schemas.booking_schema import ExistingBooking
from salon_scheduler.utils import MINUTES_PER_DAY


def intervals_overlap(a_start, a_end, b_start, b_end) -> bool:
    """True when [a_start, a_end) and [b_start, b_end) share any instant.

    Intervals that only touch (one ends exactly where the other starts)
    do not overlap.
    """
    return a_start < b_end and a_end > b_start


def booking_minutes_on(booking: ExistingBooking, day: date) -> Optional[tuple[int, int]]:
    """Portion of a booking that falls on ``day``, as minutes since midnight.

    Returns None when the booking does not touch that day. Bookings are
    compared in wall-clock time; any tzinfo is dropped.
    """
    midnight = datetime.combine(day, time.min)
    start = (booking.start.replace(tzinfo=None) - midnight).total_seconds() / 60
    end = (booking.end.replace(tzinfo=None) - midnight).total_seconds() / 60
    start_min = max(0, math.floor(start))
    end_min = min(MINUTES_PER_DAY, math.ceil(end))
    if start_min >= end_min:
        return None
    return start_min, end_min


def find_conflicts(
    bookings: Iterable[ExistingBooking],
    employee_id: int,
    start: datetime,
    end: datetime,
    exclude_ids: Iterable[int] = (),
) -> list[ExistingBooking]:
    """
    Active bookings of ``employee_id`` overlapping [start, end).

    Cancelled bookings and any id in ``exclude_ids`` (the appointment being
    edited) are ignored.
    """
    excluded = set(exclude_ids)
    return [
        booking
        for booking in bookings
        if booking.employee_id == employee_id
        and booking.is_active
        and booking.id not in excluded
        and intervals_overlap(start, end, booking.start, booking.end)
    ]
