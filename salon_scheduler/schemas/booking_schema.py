"""Booking and availability data models."""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from salon_scheduler.schemas.catalog_schema import SelectableItem


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class ExistingBooking(BaseModel):
    """A confirmed appointment occupying an employee's calendar."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    employee_id: int
    start: datetime
    end: datetime
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    @model_validator(mode="after")
    def end_after_start(self) -> "ExistingBooking":
        if self.end <= self.start:
            raise ValueError(f"Booking end {self.end} must be after start {self.start}")
        return self

    @property
    def is_active(self) -> bool:
        return self.status != AppointmentStatus.CANCELLED


class AvailabilityQuery(BaseModel):
    """What the customer asked for: a day, the chosen items, maybe an employee."""

    date: date
    selected_items: list[SelectableItem] = Field(default_factory=list)
    candidate_employee_id: Optional[int] = None


class AvailabilityStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    INVALID_REQUEST = "invalid_request"


class EmployeeSlots(BaseModel):
    """Free start times for one eligible employee."""

    employee_id: int
    employee_name: str = ""
    slots: list[str] = Field(default_factory=list)


class AvailabilityResult(BaseModel):
    """Availability check result."""

    status: AvailabilityStatus
    date: date
    total_duration_minutes: int = 0
    eligible_employee_ids: list[int] = Field(default_factory=list)
    employees: list[EmployeeSlots] = Field(default_factory=list)
    message: str = ""

    @property
    def available(self) -> bool:
        return self.status == AvailabilityStatus.AVAILABLE
