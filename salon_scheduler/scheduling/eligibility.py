"""
Eligibility Filter

Narrows the employee roster to the people who can take a booking on a
given day for a given set of services.
"""

import logging
from datetime import date
from typing import Iterable

from salon_scheduler.schemas.employee_schema import Employee
from salon_scheduler.schemas.schedule_schema import Weekday, WeeklySchedule
from salon_scheduler.scheduling.schedule_resolver import effective_window

logger = logging.getLogger(__name__)


def eligible_employees(
    employees: Iterable[Employee],
    day: date,
    required_service_ids: Iterable[int],
    company_schedule: WeeklySchedule,
) -> list[Employee]:
    """
    Employees able to perform every required service on ``day``.

    An employee qualifies when they are active, their own schedule is open
    that weekday, and their service set contains all of the required ids.
    Roster order is preserved. Returns an empty list when the business is
    closed that day or no services were requested.
    """
    required = set(required_service_ids)
    if not required:
        logger.debug("No services requested; nobody is eligible")
        return []

    weekday = Weekday.from_date(day)
    if effective_window(company_schedule.for_weekday(weekday)) is None:
        logger.debug("Business closed on %s (%s)", day, weekday.value)
        return []

    eligible = []
    for employee in employees:
        if not employee.active:
            continue
        if effective_window(employee.working_hours.for_weekday(weekday)) is None:
            continue
        if not required <= employee.service_ids:
            continue
        eligible.append(employee)

    logger.debug(
        "%d employee(s) eligible on %s for services %s",
        len(eligible), day, sorted(required),
    )
    return eligible
