"""Tests for the availability lookup combining eligibility and slots."""

from salon_scheduler.schemas.booking_schema import AvailabilityQuery, AvailabilityStatus
from salon_scheduler.schemas.catalog_schema import ItemKind
from salon_scheduler.tools.availability import check_availability, get_available_dates
from tests.conftest import MONDAY, SATURDAY, SUNDAY, make_booking, make_employee, make_item


class TestCheckAvailability:
    def setup_method(self):
        self.roster = [
            make_employee(1, service_ids={1, 3}, name="Joao"),
            make_employee(2, service_ids={2}, name="Maria"),
            make_employee(3, service_ids={1, 2, 3}, name="Ricardo"),
        ]

    def test_nothing_selected_is_invalid(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY)
        result = check_availability(query, self.roster, company_schedule, [])
        assert result.status == AvailabilityStatus.INVALID_REQUEST
        assert "at least one" in result.message

    def test_negative_granularity_is_invalid(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY, selected_items=[make_item(1, 30)])
        result = check_availability(query, self.roster, company_schedule, [], -5)
        assert result.status == AvailabilityStatus.INVALID_REQUEST

    def test_zero_granularity_is_invalid(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY, selected_items=[make_item(1, 30)])
        result = check_availability(
            query, self.roster, company_schedule, [], granularity_minutes=0
        )
        assert result.status == AvailabilityStatus.INVALID_REQUEST
        assert result.employees == []

    def test_lists_every_eligible_employee(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY, selected_items=[make_item(1, 30)])
        result = check_availability(query, self.roster, company_schedule, [])

        assert result.available
        assert result.eligible_employee_ids == [1, 3]
        assert [e.employee_name for e in result.employees] == ["Joao", "Ricardo"]
        assert result.employees[0].slots[0] == "08:00"
        assert result.total_duration_minutes == 30

    def test_combo_requires_all_components(self, company_schedule):
        combo = make_item(1, 75, [1, 3], kind=ItemKind.COMBO)
        extra = make_item(2, 60)
        query = AvailabilityQuery(date=MONDAY, selected_items=[combo, extra])
        result = check_availability(query, self.roster, company_schedule, [])

        assert result.eligible_employee_ids == [3]
        assert result.total_duration_minutes == 135

    def test_candidate_employee_only(self, company_schedule):
        query = AvailabilityQuery(
            date=MONDAY, selected_items=[make_item(1, 30)], candidate_employee_id=3
        )
        result = check_availability(query, self.roster, company_schedule, [])
        assert [e.employee_id for e in result.employees] == [3]

    def test_candidate_not_eligible(self, company_schedule):
        query = AvailabilityQuery(
            date=MONDAY, selected_items=[make_item(1, 30)], candidate_employee_id=2
        )
        result = check_availability(query, self.roster, company_schedule, [])
        assert result.status == AvailabilityStatus.UNAVAILABLE
        assert result.employees == []
        assert "Employee 2 is not available" in result.message

    def test_closed_day_unavailable(self, company_schedule):
        query = AvailabilityQuery(date=SUNDAY, selected_items=[make_item(1, 30)])
        result = check_availability(query, self.roster, company_schedule, [])
        assert result.status == AvailabilityStatus.UNAVAILABLE
        assert result.eligible_employee_ids == []

    def test_fully_booked_employee_unavailable(self, company_schedule):
        query = AvailabilityQuery(
            date=MONDAY, selected_items=[make_item(1, 30)], candidate_employee_id=1
        )
        bookings = [make_booking("08:00", "18:00", employee_id=1)]
        result = check_availability(query, self.roster, company_schedule, bookings)

        assert result.status == AvailabilityStatus.UNAVAILABLE
        assert result.employees[0].slots == []

    def test_granularity_override(self, company_schedule):
        query = AvailabilityQuery(
            date=MONDAY, selected_items=[make_item(1, 30)], candidate_employee_id=1
        )
        result = check_availability(query, self.roster, company_schedule, [], 60)
        assert result.employees[0].slots[:3] == ["08:00", "09:00", "10:00"]


class TestAvailableDates:
    def test_skips_closed_sunday(self, company_schedule):
        query = AvailabilityQuery(date=SATURDAY, selected_items=[make_item(1, 30)])
        dates = get_available_dates(query, [make_employee(1)], company_schedule, [], limit=2)

        assert [d["date"] for d in dates] == ["2025-08-16", "2025-08-18"]
        assert dates[1]["weekday"] == "monday"
        assert dates[0]["slot_count"] > 0

    def test_respects_lookahead(self, company_schedule):
        query = AvailabilityQuery(date=SUNDAY, selected_items=[make_item(1, 30)])
        assert get_available_dates(
            query, [make_employee(1)], company_schedule, [], lookahead_days=1
        ) == []

    def test_invalid_request_returns_nothing(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY)
        assert get_available_dates(query, [make_employee(1)], company_schedule, []) == []

    def test_zero_limit_returns_nothing(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY, selected_items=[make_item(1, 30)])
        assert get_available_dates(
            query, [make_employee(1)], company_schedule, [], limit=0
        ) == []

    def test_zero_lookahead_returns_nothing(self, company_schedule):
        query = AvailabilityQuery(date=MONDAY, selected_items=[make_item(1, 30)])
        assert get_available_dates(
            query, [make_employee(1)], company_schedule, [], lookahead_days=0
        ) == []
