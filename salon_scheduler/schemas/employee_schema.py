"""Employee data as seen by the availability resolver."""

from pydantic import BaseModel, ConfigDict, Field

from salon_scheduler.schemas.schedule_schema import WeeklySchedule


class Employee(BaseModel):
    """Narrow projection of an employee record: who, when, and what they do."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""
    active: bool = True
    working_hours: WeeklySchedule
    service_ids: frozenset[int] = Field(default_factory=frozenset)
