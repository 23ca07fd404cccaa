"""Shared utilities used across the salon scheduler."""

import re

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_time_of_day(value: str) -> int:
    """Parse a 24-hour ``HH:MM`` string into minutes since midnight.

    ``24:00`` is accepted so a schedule can close at the end of the day.

    Examples:
        >>> parse_time_of_day("08:30")
        510
        >>> parse_time_of_day("24:00")
        1440
    """
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid time of day: {value!r} (expected HH:MM)")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59 or hours > 24 or (hours == 24 and minutes != 0):
        raise ValueError(f"Invalid time of day: {value!r}")
    return hours * 60 + minutes


def format_time_of_day(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``.

    Examples:
        >>> format_time_of_day(690)
        '11:30'
    """
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise ValueError(f"Minutes out of range for a single day: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
