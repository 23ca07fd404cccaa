"""Weekly working-hour schedules for the business and its employees."""

import logging
from datetime import date
from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from salon_scheduler.utils import MINUTES_PER_DAY, parse_time_of_day

logger = logging.getLogger(__name__)


class Weekday(str, Enum):
    """Days of the week in the order schedules are stored (Sunday first)."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        # date.weekday() is Monday=0, storage order is Sunday=0
        return list(cls)[(day.weekday() + 1) % 7]


class DaySchedule(BaseModel):
    """Working hours for a single weekday.

    Times are accepted as ``HH:MM`` strings (or minutes since midnight) and
    stored as minutes since midnight. Break bounds are parsed leniently:
    a malformed break is kept as ``None`` so the day degrades to "no break"
    instead of failing the whole schedule.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    weekday: Weekday
    active: bool = True
    start: int = Field(ge=0, le=MINUTES_PER_DAY)
    end: int = Field(ge=0, le=MINUTES_PER_DAY)
    has_break: bool = False
    break_start: Optional[int] = None
    break_end: Optional[int] = None

    @field_validator("start", "end", mode="before")
    @classmethod
    def parse_bound(cls, value: Union[str, int]) -> int:
        if isinstance(value, str):
            return parse_time_of_day(value)
        return value

    @field_validator("break_start", "break_end", mode="before")
    @classmethod
    def parse_break_bound(cls, value: Union[str, int, None]) -> Optional[int]:
        if value is None or isinstance(value, int):
            return value
        if not str(value).strip():
            return None
        try:
            return parse_time_of_day(str(value))
        except ValueError:
            logger.warning("Ignoring malformed break time %r", value)
            return None


class WeeklySchedule(BaseModel):
    """Exactly seven day schedules, one per weekday, Sunday to Saturday."""

    model_config = ConfigDict(frozen=True)

    days: list[DaySchedule]

    @field_validator("days")
    @classmethod
    def one_entry_per_weekday(cls, days: list[DaySchedule]) -> list[DaySchedule]:
        weekdays = [d.weekday for d in days]
        if len(days) != 7 or set(weekdays) != set(Weekday):
            missing = [w.value for w in Weekday if w not in weekdays]
            raise ValueError(
                "A weekly schedule needs each weekday exactly once; "
                f"got {len(days)} entries, missing {missing}"
            )
        order = list(Weekday)
        return sorted(days, key=lambda d: order.index(d.weekday))

    def for_weekday(self, weekday: Weekday) -> DaySchedule:
        for day in self.days:
            if day.weekday == weekday:
                return day
        raise KeyError(weekday)

    def for_date(self, day: date) -> DaySchedule:
        return self.for_weekday(Weekday.from_date(day))

    @classmethod
    def uniform(
        cls,
        start: str,
        end: str,
        break_start: Optional[str] = None,
        break_end: Optional[str] = None,
        closed_days: Iterable[Weekday] = (Weekday.SUNDAY,),
    ) -> "WeeklySchedule":
        """Build a schedule with the same hours every open day."""
        closed = set(closed_days)
        has_break = break_start is not None and break_end is not None
        return cls(
            days=[
                DaySchedule(
                    weekday=weekday,
                    active=weekday not in closed,
                    start=start,
                    end=end,
                    has_break=has_break,
                    break_start=break_start,
                    break_end=break_end,
                )
                for weekday in Weekday
            ]
        )
