"""
Availability lookup for the booking screen.

Combines the eligibility filter and the slot generator over a read-only
snapshot of staff, company hours and existing bookings. The result is an
optimistic hint: the booking store re-checks conflicts when the booking
is committed.
"""

from datetime import date, timedelta
from typing import Iterable, Optional, TypedDict

from salon_scheduler.config import settings
from salon_scheduler.logging_context import get_request_logger
from salon_scheduler.schemas.booking_schema import (
    AvailabilityQuery,
    AvailabilityResult,
    AvailabilityStatus,
    EmployeeSlots,
    ExistingBooking,
)
from salon_scheduler.schemas.employee_schema import Employee
from salon_scheduler.schemas.schedule_schema import Weekday, WeeklySchedule
from salon_scheduler.scheduling import eligible_employees, generate_slots
from salon_scheduler.tools.catalog import required_service_ids, total_duration

logger = get_request_logger(__name__)


class DateAvailability(TypedDict):
    """Summary of availability for a single date."""

    date: str
    weekday: str
    slot_count: int


def check_availability(
    query: AvailabilityQuery,
    employees: Iterable[Employee],
    company_schedule: WeeklySchedule,
    bookings: Iterable[ExistingBooking],
    granularity_minutes: Optional[int] = None,
) -> AvailabilityResult:
    """
    Check which employees can take the selected items on the query date, and when.

    With ``query.candidate_employee_id`` set only that employee's slots are
    computed; otherwise every eligible employee is listed. Invalid requests
    (nothing selected, bad granularity) come back as ``invalid_request``
    instead of raising.
    """
    granularity = (
        settings.booking.slot_granularity_minutes
        if granularity_minutes is None
        else granularity_minutes
    )

    if not query.selected_items:
        return AvailabilityResult(
            status=AvailabilityStatus.INVALID_REQUEST,
            date=query.date,
            message="Select at least one service or combo.",
        )
    if granularity <= 0:
        return AvailabilityResult(
            status=AvailabilityStatus.INVALID_REQUEST,
            date=query.date,
            message=f"Slot granularity must be positive, got {granularity}.",
        )

    duration = total_duration(query.selected_items)
    required = required_service_ids(query.selected_items)
    bookings = list(bookings)

    eligible = eligible_employees(employees, query.date, required, company_schedule)
    candidates = eligible
    if query.candidate_employee_id is not None:
        candidates = [e for e in eligible if e.id == query.candidate_employee_id]

    if not candidates:
        who = (
            f"Employee {query.candidate_employee_id} is not"
            if query.candidate_employee_id is not None
            else "No employee is"
        )
        logger.info("%s eligible for services %s on %s", who, required, query.date)
        return AvailabilityResult(
            status=AvailabilityStatus.UNAVAILABLE,
            date=query.date,
            total_duration_minutes=duration,
            eligible_employee_ids=[e.id for e in eligible],
            message=f"{who} available for the selected services on {query.date}.",
        )

    company_day = company_schedule.for_date(query.date)
    per_employee = [
        EmployeeSlots(
            employee_id=employee.id,
            employee_name=employee.name,
            slots=generate_slots(
                employee, query.date, duration, bookings, company_day, granularity
            ),
        )
        for employee in candidates
    ]
    slot_count = sum(len(e.slots) for e in per_employee)
    logger.info(
        "%d slot(s) of %d min across %d employee(s) on %s",
        slot_count, duration, len(per_employee), query.date,
    )

    if slot_count == 0:
        return AvailabilityResult(
            status=AvailabilityStatus.UNAVAILABLE,
            date=query.date,
            total_duration_minutes=duration,
            eligible_employee_ids=[e.id for e in eligible],
            employees=per_employee,
            message=f"No free time on {query.date} for {duration} minutes.",
        )

    return AvailabilityResult(
        status=AvailabilityStatus.AVAILABLE,
        date=query.date,
        total_duration_minutes=duration,
        eligible_employee_ids=[e.id for e in eligible],
        employees=per_employee,
        message=f"{slot_count} time slots available on {query.date}.",
    )


def get_available_dates(
    query: AvailabilityQuery,
    employees: Iterable[Employee],
    company_schedule: WeeklySchedule,
    bookings: Iterable[ExistingBooking],
    limit: int = 5,
    lookahead_days: Optional[int] = None,
    granularity_minutes: Optional[int] = None,
) -> list[DateAvailability]:
    """Get up to ``limit`` dates, starting at the query date, with a free slot."""
    employees = list(employees)
    bookings = list(bookings)
    horizon = settings.booking.lookahead_days if lookahead_days is None else lookahead_days
    if limit <= 0:
        return []

    results: list[DateAvailability] = []
    for offset in range(horizon):
        day: date = query.date + timedelta(days=offset)
        result = check_availability(
            query.model_copy(update={"date": day}),
            employees,
            company_schedule,
            bookings,
            granularity_minutes,
        )
        if result.status == AvailabilityStatus.INVALID_REQUEST:
            return []
        if result.available:
            results.append(
                {
                    "date": day.isoformat(),
                    "weekday": Weekday.from_date(day).value,
                    "slot_count": sum(len(e.slots) for e in result.employees),
                }
            )
        if len(results) >= limit:
            break
    return results
