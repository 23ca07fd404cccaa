"""
Schedule Resolver

Turns a day's working-hour record into the interval that can actually be
booked, and combines company hours with an employee's personal hours.
Both functions are total: bad data narrows the result, it never raises.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from salon_scheduler.schemas.schedule_schema import DaySchedule
from salon_scheduler.utils import format_time_of_day

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenInterval:
    """Bookable part of a day, in minutes since midnight, with an optional break."""

    start: int
    end: int
    break_start: Optional[int] = None
    break_end: Optional[int] = None

    @property
    def has_break(self) -> bool:
        return self.break_start is not None and self.break_end is not None

    def __str__(self) -> str:
        text = f"{format_time_of_day(self.start)}-{format_time_of_day(self.end)}"
        if self.has_break:
            text += (
                f" (break {format_time_of_day(self.break_start)}"
                f"-{format_time_of_day(self.break_end)})"
            )
        return text


def effective_window(day_schedule: DaySchedule) -> Optional[OpenInterval]:
    """
    Resolve the open interval for one day.

    Returns None when the day is closed. The break is kept only when it lies
    inside the working hours and starts before it ends; otherwise the day is
    treated as having no break.
    """
    if not day_schedule.active:
        return None

    start, end = day_schedule.start, day_schedule.end
    if start >= end:
        logger.warning(
            "Ignoring %s schedule: opens at %s but closes at %s",
            day_schedule.weekday.value,
            format_time_of_day(start),
            format_time_of_day(end),
        )
        return None

    if not day_schedule.has_break:
        return OpenInterval(start, end)

    break_start, break_end = day_schedule.break_start, day_schedule.break_end
    if (
        break_start is None
        or break_end is None
        or not start <= break_start < break_end <= end
    ):
        logger.warning(
            "Invalid break on %s (%r-%r); treating the day as having no break",
            day_schedule.weekday.value,
            break_start,
            break_end,
        )
        return OpenInterval(start, end)

    return OpenInterval(start, end, break_start, break_end)


def intersect(a: OpenInterval, b: OpenInterval) -> Optional[OpenInterval]:
    """Common open time of two windows, or None if they do not overlap.

    Break fields are not carried over; callers check each window's break
    separately.
    """
    start = max(a.start, b.start)
    end = min(a.end, b.end)
    if start >= end:
        return None
    return OpenInterval(start, end)
