"""Tests for resolving working-hour records into open intervals."""

from salon_scheduler.schemas.schedule_schema import DaySchedule, Weekday
from salon_scheduler.scheduling.schedule_resolver import (
    OpenInterval,
    effective_window,
    intersect,
)


def _day(**overrides) -> DaySchedule:
    values = dict(weekday=Weekday.MONDAY, start="08:00", end="18:00")
    values.update(overrides)
    return DaySchedule(**values)


class TestEffectiveWindow:
    def test_inactive_day_is_closed(self):
        assert effective_window(_day(active=False)) is None

    def test_open_day_without_break(self):
        assert effective_window(_day()) == OpenInterval(480, 1080)

    def test_valid_break_is_kept(self):
        window = effective_window(
            _day(has_break=True, break_start="12:00", break_end="13:00")
        )
        assert window == OpenInterval(480, 1080, 720, 780)
        assert window.has_break

    def test_break_fields_ignored_when_has_break_false(self):
        window = effective_window(
            _day(has_break=False, break_start="12:00", break_end="13:00")
        )
        assert not window.has_break

    def test_reversed_break_degrades_to_no_break(self):
        window = effective_window(
            _day(has_break=True, break_start="13:00", break_end="12:00")
        )
        assert window == OpenInterval(480, 1080)

    def test_empty_break_degrades_to_no_break(self):
        window = effective_window(
            _day(has_break=True, break_start="12:00", break_end="12:00")
        )
        assert not window.has_break

    def test_break_outside_hours_degrades_to_no_break(self):
        window = effective_window(
            _day(has_break=True, break_start="17:30", break_end="18:30")
        )
        assert not window.has_break

    def test_missing_break_bound_degrades_to_no_break(self):
        window = effective_window(_day(has_break=True, break_start="12:00"))
        assert not window.has_break

    def test_break_touching_opening_and_closing_is_valid(self):
        window = effective_window(
            _day(has_break=True, break_start="08:00", break_end="18:00")
        )
        assert window.has_break

    def test_close_before_open_is_closed(self):
        assert effective_window(_day(start="18:00", end="08:00")) is None
        assert effective_window(_day(start="09:00", end="09:00")) is None

    def test_str_renders_clock_times(self):
        window = OpenInterval(480, 1080, 720, 780)
        assert str(window) == "08:00-18:00 (break 12:00-13:00)"


class TestIntersect:
    def test_employee_hours_inside_company_hours(self):
        company = OpenInterval(480, 1080)
        employee = OpenInterval(540, 960)
        assert intersect(company, employee) == OpenInterval(540, 960)

    def test_partial_overlap(self):
        assert intersect(OpenInterval(480, 720), OpenInterval(600, 900)) == OpenInterval(600, 720)

    def test_symmetric(self):
        a, b = OpenInterval(480, 720), OpenInterval(600, 900)
        assert intersect(a, b) == intersect(b, a)

    def test_disjoint_windows(self):
        assert intersect(OpenInterval(480, 600), OpenInterval(660, 900)) is None

    def test_touching_windows_are_empty(self):
        assert intersect(OpenInterval(480, 600), OpenInterval(600, 900)) is None

    def test_breaks_are_not_carried_over(self):
        result = intersect(OpenInterval(480, 1080, 720, 780), OpenInterval(540, 960))
        assert not result.has_break
