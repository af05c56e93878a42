"""
test_stats_service.py — Unit tests for the dashboard derivations.

Tests cover:
  - extract_department_code: parenthesized codes, bare labels, empty values
  - department_distribution / status_distribution: counts and ordering
  - top_performers: filtering, ranking, ties, limit
  - upcoming_birthdays: today, window edges, year rollover, leap days, limit
  - dashboard_stats: totals

All tests are pure; no database required.
"""

from datetime import date, datetime, timedelta

import pytest

from conftest import TODAY, make_employee
from hr_dashboard.models.employee_models import Employee
from hr_dashboard.services.stats_service import (
    dashboard_stats,
    days_until,
    department_distribution,
    extract_department_code,
    next_birthday,
    status_distribution,
    top_performers,
    upcoming_birthdays,
)


def _born(days_from_today: int, years_ago: int = 30) -> date:
    """Birth date whose anniversary falls days_from_today after TODAY."""
    anniversary = TODAY + timedelta(days=days_from_today)
    return anniversary.replace(year=anniversary.year - years_ago)


# ===========================================================================
# Department code extraction
# ===========================================================================

class TestExtractDepartmentCode:

    def test_parenthesized_acronym(self):
        assert extract_department_code("(CYDD) Child and Youth Development Division") == "CYDD"

    def test_acronym_not_at_start(self):
        assert extract_department_code("Crisis Intervention Unit (CIU)") == "CIU"

    def test_first_parenthesized_group_wins(self):
        assert extract_department_code("(4Ps) Pantawid (Program)") == "4Ps"

    def test_bare_label_uses_first_token(self):
        assert extract_department_code("Engineering") == "Engineering"
        assert extract_department_code("Cabalai ni Apong") == "Cabalai"

    @pytest.mark.parametrize("value", ["", None, "   "])
    def test_empty_is_unknown(self, value):
        assert extract_department_code(value) == "Unknown"

    @pytest.mark.parametrize("value", [
        "(CYDD) Child and Youth Development Division",
        "(ADMIN) Administrative Division",
        "Engineering",
        "Cabalai ni Apong",
        "",
    ])
    def test_idempotent(self, value):
        once = extract_department_code(value)
        assert extract_department_code(once) == once


# ===========================================================================
# Distributions
# ===========================================================================

class TestDistributions:

    def _staff(self):
        return [
            make_employee("EMP-0001", department="Engineering", status="Job Order"),
            make_employee("EMP-0002", department="(CYDD) Child and Youth", status="Permanent"),
            make_employee("EMP-0003", department="(HR) Human Resources", status="Permanent"),
            make_employee("EMP-0004", department="(CYDD) Child and Youth", status=None),
            make_employee("EMP-0005", department="", status="Co-Term"),
        ]

    def test_department_counts_sorted_descending_ties_first_seen(self):
        result = department_distribution(self._staff())
        assert [(d.name, d.count) for d in result] == [
            ("CYDD", 2),
            ("Engineering", 1),
            ("HR", 1),
            ("Unknown", 1),
        ]

    def test_status_counts_first_seen_order(self):
        result = status_distribution(self._staff())
        assert [(s.name, s.count) for s in result] == [
            ("Job Order", 1),
            ("Permanent", 2),
            ("Unknown", 1),
            ("Co-Term", 1),
        ]

    def test_counts_sum_to_headcount(self):
        staff = self._staff()
        assert sum(d.count for d in department_distribution(staff)) == len(staff)
        assert sum(s.count for s in status_distribution(staff)) == len(staff)

    def test_empty_input(self):
        assert department_distribution([]) == []
        assert status_distribution([]) == []


# ===========================================================================
# Top performers
# ===========================================================================

class TestTopPerformers:

    def test_ranks_by_rating_and_limits_to_three(self):
        staff = [
            make_employee("EMP-0001", performance_rating=3.2),
            make_employee("EMP-0002", performance_rating=4.9),
            make_employee("EMP-0003", performance_rating=4.1),
            make_employee("EMP-0004", performance_rating=2.0),
            make_employee("EMP-0005", performance_rating=4.5),
        ]
        result = top_performers(staff)
        assert [p.id for p in result] == ["EMP-0002", "EMP-0005", "EMP-0003"]

    def test_ties_keep_input_order(self):
        staff = [
            make_employee("EMP-0001", performance_rating=3.0),
            make_employee("EMP-0002", performance_rating=4.8),
            make_employee("EMP-0003", performance_rating=4.8),
        ]
        result = top_performers(staff)
        assert [p.id for p in result[:2]] == ["EMP-0002", "EMP-0003"]
        assert result[0].performance_rating == 4.8

    def test_unrated_and_zero_excluded(self):
        staff = [
            make_employee("EMP-0001", performance_rating=None),
            make_employee("EMP-0002", performance_rating=0.0),
            make_employee("EMP-0003", performance_rating=1.5),
        ]
        assert [p.id for p in top_performers(staff)] == ["EMP-0003"]

    def test_included_ratings_dominate_excluded(self):
        ratings = [2.5, 4.0, 3.9, 5.0, 1.0, 4.0]
        staff = [make_employee(f"EMP-{i:04d}", performance_rating=r) for i, r in enumerate(ratings)]
        result = top_performers(staff)
        included = {p.id for p in result}
        excluded = [e.performance_rating for e in staff if e.id not in included]
        assert len(result) == 3
        assert min(p.performance_rating for p in result) >= max(excluded)

    def test_department_uses_code(self):
        staff = [make_employee(department="(CIU) Crisis Intervention Unit", performance_rating=4.0)]
        assert top_performers(staff)[0].department == "CIU"

    def test_malformed_rating_treated_as_absent(self):
        emp = Employee.model_validate({"id": "EMP-0001", "performanceRating": "excellent"})
        assert emp.performance_rating is None
        assert top_performers([emp]) == []

    def test_out_of_range_rating_treated_as_absent(self):
        staff = [
            Employee.model_validate({"id": "EMP-0001", "performanceRating": 9}),
            Employee.model_validate({"id": "EMP-0002", "performanceRating": -2}),
            Employee.model_validate({"id": "EMP-0003", "performanceRating": 5.0}),
            Employee.model_validate({"id": "EMP-0004", "performanceRating": "3.5"}),
        ]
        assert staff[0].performance_rating is None
        assert staff[1].performance_rating is None
        assert [p.id for p in top_performers(staff)] == ["EMP-0003", "EMP-0004"]


# ===========================================================================
# Upcoming birthdays
# ===========================================================================

class TestNextBirthday:

    def test_later_this_year(self):
        assert next_birthday(date(1990, 6, 1), TODAY) == date(2025, 6, 1)

    def test_today_is_not_rolled_forward(self):
        assert next_birthday(date(1990, 3, 10), TODAY) == TODAY

    def test_already_passed_rolls_to_next_year(self):
        assert next_birthday(date(1990, 3, 9), TODAY) == date(2026, 3, 9)

    def test_leap_day_in_common_year_is_march_first(self):
        assert next_birthday(date(1992, 2, 29), date(2025, 2, 20)) == date(2025, 3, 1)

    def test_days_until_rounds_up_partial_days(self):
        noon = datetime(2025, 3, 10, 12, 0)
        assert days_until(date(2025, 3, 10), noon) == 0
        assert days_until(date(2025, 3, 11), noon) == 1
        assert days_until(date(2025, 3, 11), TODAY) == 1


class TestUpcomingBirthdays:

    def test_birthday_today_is_zero_days(self):
        staff = [make_employee(birth_date=_born(0))]
        result = upcoming_birthdays(staff, TODAY)
        assert len(result) == 1
        assert result[0].days_until == 0

    def test_birthday_today_with_time_of_day(self):
        staff = [make_employee(birth_date=_born(0))]
        result = upcoming_birthdays(staff, datetime(2025, 3, 10, 17, 45))
        assert result[0].days_until == 0

    def test_window_edges(self):
        staff = [
            make_employee("EMP-0001", birth_date=_born(60)),
            make_employee("EMP-0002", birth_date=_born(61)),
        ]
        result = upcoming_birthdays(staff, TODAY)
        assert [b.id for b in result] == ["EMP-0001"]
        assert result[0].days_until == 60

    def test_yesterday_is_excluded(self):
        staff = [make_employee(birth_date=_born(-1))]
        assert upcoming_birthdays(staff, TODAY) == []

    def test_rollover_across_new_year(self):
        staff = [make_employee(birth_date=date(1985, 1, 5))]
        result = upcoming_birthdays(staff, date(2025, 12, 20))
        assert result[0].days_until == 16

    def test_view_fields(self):
        staff = [make_employee(
            "EMP-0007",
            name="Maria Santos",
            department="(TMC) Tahanan ni Maria Center",
            birth_date=date(1990, 3, 25),
            age=34,
        )]
        birthday = upcoming_birthdays(staff, TODAY)[0]
        assert birthday.id == "EMP-0007"
        assert birthday.name == "Maria Santos"
        assert birthday.department == "TMC"
        assert birthday.birth_date == date(1990, 3, 25)
        assert birthday.age == 35
        assert birthday.birth_day == 25
        assert birthday.birth_month == "Mar"
        assert birthday.days_until == 15

    def test_sorted_and_limited_to_five(self):
        offsets = [40, 3, 12, 0, 55, 7, 21]
        staff = [make_employee(f"EMP-{i:04d}", birth_date=_born(d)) for i, d in enumerate(offsets)]
        result = upcoming_birthdays(staff, TODAY)
        assert [b.days_until for b in result] == [0, 3, 7, 12, 21]
        assert all(0 <= b.days_until <= 60 for b in result)

    def test_missing_and_malformed_dates_skipped(self):
        malformed = Employee.model_validate({"id": "EMP-0002", "birthDate": "31/12/1990"})
        staff = [make_employee("EMP-0001", birth_date=None), malformed]
        assert malformed.birth_date is None
        assert upcoming_birthdays(staff, TODAY) == []

    def test_custom_window_and_limit(self):
        staff = [make_employee(f"EMP-{d:04d}", birth_date=_born(d)) for d in (1, 2, 10)]
        result = upcoming_birthdays(staff, TODAY, window_days=5, limit=1)
        assert [b.days_until for b in result] == [1]

    def test_empty_input(self):
        assert upcoming_birthdays([], TODAY) == []


# ===========================================================================
# Dashboard summary
# ===========================================================================

def test_dashboard_stats_totals():
    staff = [
        make_employee("EMP-0001", training_hours=12, performance_rating=4.2),
        make_employee("EMP-0002", training_hours=None, department="Engineering"),
        make_employee("EMP-0003", training_hours=8),
    ]
    stats = dashboard_stats(staff)
    assert stats.total_employees == 3
    assert stats.total_training_hours == 20
    assert [d.name for d in stats.departments] == ["CYDD", "Engineering"]
    assert [p.id for p in stats.top_performers] == ["EMP-0001"]


def test_dashboard_stats_empty():
    stats = dashboard_stats([])
    assert stats.total_employees == 0
    assert stats.total_training_hours == 0
    assert stats.departments == []
    assert stats.statuses == []
    assert stats.top_performers == []
