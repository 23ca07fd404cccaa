"""Shared test fixtures and helpers."""

from datetime import date, datetime
from typing import Iterable, Optional

import pytest

from salon_scheduler.schemas.booking_schema import AppointmentStatus, ExistingBooking
from salon_scheduler.schemas.catalog_schema import ItemKind, SelectableItem
from salon_scheduler.schemas.employee_schema import Employee
from salon_scheduler.schemas.schedule_schema import Weekday, WeeklySchedule
from salon_scheduler.tools import booking

SUNDAY = date(2025, 8, 10)
MONDAY = date(2025, 8, 11)
TUESDAY = date(2025, 8, 12)
SATURDAY = date(2025, 8, 16)


@pytest.fixture(autouse=True)
def _reset_booking_store():
    booking.reset()
    yield
    booking.reset()


@pytest.fixture
def company_schedule() -> WeeklySchedule:
    """Open 08:00-18:00 with a 12:00-13:00 break, closed on Sunday."""
    return WeeklySchedule.uniform("08:00", "18:00", "12:00", "13:00")


def make_employee(
    employee_id: int = 1,
    service_ids: Iterable[int] = (1, 2, 3),
    schedule: Optional[WeeklySchedule] = None,
    active: bool = True,
    name: str = "",
) -> Employee:
    """Helper to create an Employee working 08:00-18:00 without a break."""
    return Employee(
        id=employee_id,
        name=name or f"Employee {employee_id}",
        active=active,
        working_hours=schedule or WeeklySchedule.uniform("08:00", "18:00"),
        service_ids=frozenset(service_ids),
    )


def make_booking(
    start: str,
    end: str,
    employee_id: int = 1,
    day: date = MONDAY,
    status: AppointmentStatus = AppointmentStatus.SCHEDULED,
    booking_id: Optional[int] = None,
) -> ExistingBooking:
    """Helper to create an ExistingBooking from HH:MM bounds on one day."""
    start_h, start_m = map(int, start.split(":"))
    end_h, end_m = map(int, end.split(":"))
    return ExistingBooking(
        id=booking_id,
        employee_id=employee_id,
        start=datetime(day.year, day.month, day.day, start_h, start_m),
        end=datetime(day.year, day.month, day.day, end_h, end_m),
        status=status,
    )


def make_item(
    item_id: int,
    duration: int,
    service_ids: Optional[list[int]] = None,
    kind: ItemKind = ItemKind.SERVICE,
    price_cents: int = 0,
) -> SelectableItem:
    """Helper to create a SelectableItem; a service defaults to itself as component."""
    return SelectableItem(
        id=item_id,
        kind=kind,
        name=f"{kind.value} {item_id}",
        duration_minutes=duration,
        price_cents=price_cents,
        component_service_ids=service_ids or [item_id],
    )


def closed_on(*weekdays: Weekday, start: str = "08:00", end: str = "18:00") -> WeeklySchedule:
    """Helper to create a schedule closed on the given weekdays."""
    return WeeklySchedule.uniform(start, end, closed_days=weekdays)
