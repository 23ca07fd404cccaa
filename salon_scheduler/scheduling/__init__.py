from salon_scheduler.scheduling.eligibility import eligible_employees
from salon_scheduler.scheduling.overlap import find_conflicts, intervals_overlap
from salon_scheduler.scheduling.schedule_resolver import (
    OpenInterval,
    effective_window,
    intersect,
)
from salon_scheduler.scheduling.slot_generator import (
    DEFAULT_GRANULARITY_MINUTES,
    free_start_minutes,
    generate_slots,
)

__all__ = [
    "OpenInterval",
    "effective_window",
    "intersect",
    "eligible_employees",
    "generate_slots",
    "free_start_minutes",
    "DEFAULT_GRANULARITY_MINUTES",
    "intervals_overlap",
    "find_conflicts",
]
