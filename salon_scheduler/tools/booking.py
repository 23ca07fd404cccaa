"""
In-memory appointment store.

Plays the role of the persistence layer behind the booking screen: it
splits a multi-service selection into back-to-back appointments and runs
the authoritative overlap check at commit time, since availability
computed earlier may be stale.
"""

import uuid
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional, TypedDict

from salon_scheduler.logging_context import get_request_logger
from salon_scheduler.schemas.booking_schema import AppointmentStatus, ExistingBooking
from salon_scheduler.schemas.catalog_schema import SelectableItem, Service
from salon_scheduler.scheduling.overlap import booking_minutes_on, find_conflicts
from salon_scheduler.tools.catalog import plan_appointment_chain
from salon_scheduler.utils import parse_time_of_day

logger = get_request_logger(__name__)

SLOT_TAKEN_MESSAGE = "Slot no longer available, please choose another."


class AppointmentRecord(TypedDict):
    """Appointment stored in the system."""

    id: int
    group_id: str
    client_id: int
    employee_id: int
    service_id: int
    start: datetime
    end: datetime
    status: str
    created_at: str


class BookingResult(TypedDict, total=False):
    """Result from create_booking, cancel_booking, or reschedule_booking."""

    success: bool
    message: str
    retryable: bool
    group_id: str
    appointments: list[AppointmentRecord]


_appointments: dict[int, AppointmentRecord] = {}
_last_id = 0


def _next_id() -> int:
    global _last_id
    _last_id += 1
    return _last_id


def _to_existing(record: AppointmentRecord) -> ExistingBooking:
    return ExistingBooking(
        id=record["id"],
        employee_id=record["employee_id"],
        start=record["start"],
        end=record["end"],
        status=AppointmentStatus(record["status"]),
    )


def _combine(day: date, start_time: str) -> datetime:
    return datetime.combine(day, time.min) + timedelta(minutes=parse_time_of_day(start_time))


def get_existing_bookings(
    employee_id: Optional[int] = None,
    day: Optional[date] = None,
    exclude_ids: Iterable[int] = (),
    include_cancelled: bool = False,
) -> list[ExistingBooking]:
    """Snapshot of stored appointments for the availability resolver.

    Pass the id of an appointment being edited in ``exclude_ids`` so it
    does not conflict with itself.
    """
    excluded = set(exclude_ids)
    snapshot = []
    for record in _appointments.values():
        if record["id"] in excluded:
            continue
        if employee_id is not None and record["employee_id"] != employee_id:
            continue
        booking = _to_existing(record)
        if not include_cancelled and not booking.is_active:
            continue
        if day is not None and booking_minutes_on(booking, day) is None:
            continue
        snapshot.append(booking)
    return sorted(snapshot, key=lambda b: b.start)


def create_booking(
    client_id: int,
    employee_id: int,
    day: date,
    start_time: str,
    items: list[SelectableItem],
    services: Iterable[Service],
) -> BookingResult:
    """Book the selected items for one employee starting at ``start_time``.

    One appointment is stored per service, back-to-back in selection order,
    all sharing a group id. If any part of the block now overlaps an active
    appointment of that employee nothing is stored and the result is marked
    retryable.
    """
    if not items:
        return {
            "success": False,
            "retryable": False,
            "message": "Cannot create booking - select at least one service or combo.",
        }
    try:
        start = _combine(day, start_time)
    except ValueError as exc:
        return {"success": False, "retryable": False, "message": f"Cannot create booking - {exc}."}

    chain = plan_appointment_chain(start, items, services)
    if not chain:
        return {
            "success": False,
            "retryable": False,
            "message": "Cannot create booking - none of the selected services exist.",
        }

    end = chain[-1].end
    conflicts = find_conflicts(get_existing_bookings(employee_id=employee_id), employee_id, start, end)
    if conflicts:
        logger.warning(
            "Conflict booking employee %s %s-%s: overlaps %s",
            employee_id, start, end, [b.id for b in conflicts],
        )
        return {"success": False, "retryable": True, "message": SLOT_TAKEN_MESSAGE}

    group_id = f"AG-{uuid.uuid4().hex[:6].upper()}"
    created_at = datetime.now().isoformat()
    records: list[AppointmentRecord] = []
    for planned in chain:
        record: AppointmentRecord = {
            "id": _next_id(),
            "group_id": group_id,
            "client_id": client_id,
            "employee_id": employee_id,
            "service_id": planned.service_id,
            "start": planned.start,
            "end": planned.end,
            "status": AppointmentStatus.SCHEDULED.value,
            "created_at": created_at,
        }
        _appointments[record["id"]] = record
        records.append(record)

    logger.info(
        "Booking created: %s for client %s with employee %s on %s %s-%s (%d item(s))",
        group_id, client_id, employee_id, day,
        start.strftime("%H:%M"), end.strftime("%H:%M"), len(records),
    )
    return {
        "success": True,
        "retryable": False,
        "group_id": group_id,
        "appointments": records,
        "message": (
            f"Booking confirmed. Reference {group_id}: {len(records)} appointment(s) "
            f"on {day} from {start:%H:%M} to {end:%H:%M}."
        ),
    }


def reschedule_booking(appointment_id: int, new_day: date, new_time: str) -> BookingResult:
    """Move one appointment, keeping its duration and employee."""
    record = _appointments.get(appointment_id)
    if record is None:
        return {"success": False, "retryable": False, "message": f"Appointment {appointment_id} not found."}
    if record["status"] != AppointmentStatus.SCHEDULED.value:
        return {
            "success": False,
            "retryable": False,
            "message": f"Appointment {appointment_id} is {record['status']} and cannot be moved.",
        }
    try:
        start = _combine(new_day, new_time)
    except ValueError as exc:
        return {"success": False, "retryable": False, "message": f"Cannot reschedule - {exc}."}
    end = start + (record["end"] - record["start"])

    conflicts = find_conflicts(
        get_existing_bookings(employee_id=record["employee_id"]),
        record["employee_id"], start, end, exclude_ids=[appointment_id],
    )
    if conflicts:
        logger.warning("Conflict moving appointment %s to %s", appointment_id, start)
        return {"success": False, "retryable": True, "message": SLOT_TAKEN_MESSAGE}

    record.update(start=start, end=end)
    logger.info("Appointment rescheduled: %s to %s %s", appointment_id, new_day, new_time)
    return {
        "success": True,
        "retryable": False,
        "group_id": record["group_id"],
        "appointments": [record],
        "message": f"Appointment {appointment_id} rescheduled to {new_day} at {new_time}.",
    }


def cancel_booking(appointment_id: int) -> BookingResult:
    """Cancel an appointment, freeing its time."""
    record = _appointments.get(appointment_id)
    if record is None:
        return {"success": False, "retryable": False, "message": f"Appointment {appointment_id} not found."}
    record["status"] = AppointmentStatus.CANCELLED.value
    logger.info("Appointment cancelled: %s", appointment_id)
    return {"success": True, "retryable": False, "message": f"Appointment {appointment_id} has been cancelled."}


def get_appointment(appointment_id: int) -> Optional[AppointmentRecord]:
    """Retrieve an appointment by id."""
    return _appointments.get(appointment_id)


def reset() -> None:
    """Clear all appointments. Used by test fixtures for isolation."""
    global _last_id
    _appointments.clear()
    _last_id = 0
