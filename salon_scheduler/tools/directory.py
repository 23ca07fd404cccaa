"""
Sample salon directory: company hours, service catalog, combos, staff.

Stands in for the hosted database the booking screens read from. Every
accessor returns a fresh list so callers can treat it as their own snapshot.
"""

from datetime import datetime

from salon_scheduler.schemas.booking_schema import AppointmentStatus, ExistingBooking
from salon_scheduler.schemas.catalog_schema import Service, ServiceCombo
from salon_scheduler.schemas.employee_schema import Employee
from salon_scheduler.schemas.schedule_schema import DaySchedule, Weekday, WeeklySchedule
from salon_scheduler.tools.catalog import parse_duration, parse_price


def _default_working_hours() -> WeeklySchedule:
    weekday_hours = dict(start="08:00", end="18:00", has_break=True,
                         break_start="12:00", break_end="13:00")
    return WeeklySchedule(
        days=[
            DaySchedule(weekday=Weekday.SUNDAY, active=False, start="10:00", end="14:00"),
            DaySchedule(weekday=Weekday.MONDAY, **weekday_hours),
            DaySchedule(weekday=Weekday.TUESDAY, **weekday_hours),
            DaySchedule(weekday=Weekday.WEDNESDAY, **weekday_hours),
            DaySchedule(weekday=Weekday.THURSDAY, **weekday_hours),
            DaySchedule(weekday=Weekday.FRIDAY, **weekday_hours),
            DaySchedule(weekday=Weekday.SATURDAY, start="09:00", end="16:00"),
        ]
    )


_SERVICES: list[Service] = [
    Service(id=sid, name=name, duration_minutes=parse_duration(duration),
            price_cents=parse_price(price))
    for sid, name, duration, price in [
        (1, "Haircut", "30 min", "35.00"),
        (2, "Hair Colouring", "60 min", "90.00"),
        (3, "Beard Trim", "45 min", "30.00"),
        (4, "Make-up", "60 min", "80.00"),
        (5, "Manicure", "60 min", "40.00"),
    ]
]

_COMBOS: list[ServiceCombo] = [
    ServiceCombo(id=1, name="Haircut + Beard", price_cents=parse_price("60.00"),
                 service_ids=[1, 3]),
    ServiceCombo(id=2, name="Bridal Package", price_cents=parse_price("100.00"),
                 service_ids=[2, 4]),
]

_EMPLOYEES: list[Employee] = [
    Employee(id=1, name="Joao Pereira", working_hours=_default_working_hours(),
             service_ids=frozenset({1, 3})),
    Employee(id=2, name="Maria Oliveira", working_hours=_default_working_hours(),
             service_ids=frozenset({2, 4, 5})),
    Employee(id=3, name="Ricardo Santos", working_hours=_default_working_hours(),
             service_ids=frozenset({1, 3, 5})),
    Employee(id=4, name="Fernanda Lima", active=False,
             working_hours=_default_working_hours(), service_ids=frozenset({2, 4})),
]

_APPOINTMENTS: list[ExistingBooking] = [
    ExistingBooking(id=9001, employee_id=1, start=datetime(2025, 8, 11, 10, 0),
                    end=datetime(2025, 8, 11, 10, 30)),
    ExistingBooking(id=9002, employee_id=2, start=datetime(2025, 8, 11, 11, 30),
                    end=datetime(2025, 8, 11, 12, 30)),
    ExistingBooking(id=9003, employee_id=1, start=datetime(2025, 8, 12, 14, 0),
                    end=datetime(2025, 8, 12, 14, 45), status=AppointmentStatus.CANCELLED),
    ExistingBooking(id=9004, employee_id=2, start=datetime(2025, 8, 12, 10, 0),
                    end=datetime(2025, 8, 12, 11, 0), status=AppointmentStatus.COMPLETED),
    ExistingBooking(id=9005, employee_id=1, start=datetime(2025, 8, 13, 15, 0),
                    end=datetime(2025, 8, 13, 15, 45)),
]


def get_company_schedule() -> WeeklySchedule:
    return _default_working_hours()


def get_services() -> list[Service]:
    return list(_SERVICES)


def get_combos() -> list[ServiceCombo]:
    return list(_COMBOS)


def get_employees() -> list[Employee]:
    return list(_EMPLOYEES)


def get_sample_appointments() -> list[ExistingBooking]:
    """Appointments already on the books before this process started."""
    return list(_APPOINTMENTS)
