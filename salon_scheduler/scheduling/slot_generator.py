"""
Slot Generator

Enumerates the start times at which an employee can take a block of work
on a given day. Candidates step from the opening of the combined
company/employee window at a fixed granularity; a candidate survives when
the whole block fits before closing and clears both breaks and every
active booking of that employee.
"""

import logging
from datetime import date
from typing import Iterable

from salon_scheduler.schemas.booking_schema import ExistingBooking
from salon_scheduler.schemas.employee_schema import Employee
from salon_scheduler.schemas.schedule_schema import DaySchedule, Weekday
from salon_scheduler.scheduling.overlap import booking_minutes_on, intervals_overlap
from salon_scheduler.scheduling.schedule_resolver import effective_window, intersect
from salon_scheduler.utils import format_time_of_day

logger = logging.getLogger(__name__)

DEFAULT_GRANULARITY_MINUTES = 15


def free_start_minutes(
    employee: Employee,
    day: date,
    total_duration_minutes: int,
    existing_bookings: Iterable[ExistingBooking],
    company_day_schedule: DaySchedule,
    granularity_minutes: int = DEFAULT_GRANULARITY_MINUTES,
) -> list[int]:
    """Free start times as minutes since midnight, ascending."""
    if total_duration_minutes <= 0 or granularity_minutes <= 0:
        logger.debug(
            "Non-positive duration (%s) or granularity (%s); no slots",
            total_duration_minutes, granularity_minutes,
        )
        return []

    weekday = Weekday.from_date(day)
    if company_day_schedule.weekday != weekday:
        logger.warning(
            "Company schedule for %s passed for %s (%s); no slots",
            company_day_schedule.weekday.value, day, weekday.value,
        )
        return []

    company_window = effective_window(company_day_schedule)
    employee_window = effective_window(employee.working_hours.for_weekday(weekday))
    if company_window is None or employee_window is None:
        return []

    window = intersect(company_window, employee_window)
    if window is None:
        return []

    blocked: list[tuple[int, int]] = []
    for source in (company_window, employee_window):
        if source.has_break:
            blocked.append((source.break_start, source.break_end))

    for booking in existing_bookings:
        if booking.employee_id != employee.id or not booking.is_active:
            continue
        occupied = booking_minutes_on(booking, day)
        if occupied is not None:
            blocked.append(occupied)

    slots = []
    candidate = window.start
    while candidate + total_duration_minutes <= window.end:
        candidate_end = candidate + total_duration_minutes
        if not any(
            intervals_overlap(candidate, candidate_end, busy_start, busy_end)
            for busy_start, busy_end in blocked
        ):
            slots.append(candidate)
        candidate += granularity_minutes

    logger.debug(
        "Employee %s on %s: window %s, %d blocked interval(s), %d free slot(s)",
        employee.id, day, window, len(blocked), len(slots),
    )
    return slots


def generate_slots(
    employee: Employee,
    day: date,
    total_duration_minutes: int,
    existing_bookings: Iterable[ExistingBooking],
    company_day_schedule: DaySchedule,
    granularity_minutes: int = DEFAULT_GRANULARITY_MINUTES,
) -> list[str]:
    """
    Free start times for ``employee`` on ``day`` as ``HH:MM`` strings.

    ``existing_bookings`` may contain other employees' and cancelled
    bookings; both are ignored. When rescheduling, leave the appointment
    being moved out of ``existing_bookings`` so it does not block itself.
    An empty list means the day is closed or fully booked.
    """
    return [
        format_time_of_day(minutes)
        for minutes in free_start_minutes(
            employee,
            day,
            total_duration_minutes,
            existing_bookings,
            company_day_schedule,
            granularity_minutes,
        )
    ]
