"""
Stats Service
Derives the dashboard views from the full employee list.

Every function here is pure: it reads an already-fetched list of employees
and a reference date supplied by the caller, and returns fresh view models.
Nothing reads the system clock or touches storage.
"""
import math
import re
from collections import Counter
from datetime import date, datetime, time
from typing import List, Optional, Sequence, Union
from hr_dashboard.models.employee_models import Employee
from hr_dashboard.models.stats_models import (
    DashboardStats,
    DepartmentCount,
    StatusCount,
    TopPerformer,
    UpcomingBirthday,
)

UNKNOWN = "Unknown"

DEFAULT_TOP_PERFORMER_LIMIT = 3
DEFAULT_BIRTHDAY_WINDOW_DAYS = 60
DEFAULT_BIRTHDAY_LIMIT = 5

_PARENTHESIZED = re.compile(r"\(([^)]+)\)")
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_SECONDS_PER_DAY = 24 * 60 * 60

ReferenceDate = Union[date, datetime]


def extract_department_code(department: Optional[str]) -> str:
    """
    Grouping key for a department label.

    "(CYDD) Child and Youth Development Division" -> "CYDD"
    "Engineering Team"                           -> "Engineering"
    "" / None                                    -> "Unknown"
    """
    if not department:
        return UNKNOWN

    match = _PARENTHESIZED.search(department)
    if match and match.group(1).strip():
        return match.group(1).strip()

    tokens = department.split()
    return tokens[0] if tokens else UNKNOWN


def department_distribution(employees: Sequence[Employee]) -> List[DepartmentCount]:
    """Headcount per department code, largest first (ties keep first-seen order)."""
    counts = Counter(extract_department_code(emp.department) for emp in employees)
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [DepartmentCount(name=name, count=count) for name, count in ranked]


def status_distribution(employees: Sequence[Employee]) -> List[StatusCount]:
    """Headcount per employment status in first-seen order."""
    counts = Counter(emp.status or UNKNOWN for emp in employees)
    return [StatusCount(name=name, count=count) for name, count in counts.items()]


def top_performers(
    employees: Sequence[Employee], limit: int = DEFAULT_TOP_PERFORMER_LIMIT
) -> List[TopPerformer]:
    """Highest rated employees; unrated and zero-rated employees are skipped."""
    rated = [emp for emp in employees if emp.performance_rating]
    rated.sort(key=lambda emp: emp.performance_rating, reverse=True)
    return [
        TopPerformer(
            id=emp.id,
            name=emp.name,
            department=extract_department_code(emp.department),
            performance_rating=emp.performance_rating,
        )
        for emp in rated[:limit]
    ]


def _occurrence_in(birth_date: date, year: int) -> date:
    try:
        return birth_date.replace(year=year)
    except ValueError:
        # Feb 29 outside a leap year
        return date(year, 3, 1)


def next_birthday(birth_date: date, today: date) -> date:
    """The next occurrence of birth_date's month/day on or after today."""
    occurrence = _occurrence_in(birth_date, today.year)
    if occurrence < today:
        occurrence = _occurrence_in(birth_date, today.year + 1)
    return occurrence


def days_until(occurrence: date, reference: ReferenceDate) -> int:
    """
    Whole days from reference to the start of occurrence, rounded up.
    A datetime reference on the occurrence day itself yields 0.
    """
    if isinstance(reference, datetime):
        start = datetime.combine(occurrence, time.min, tzinfo=reference.tzinfo)
        return math.ceil((start - reference).total_seconds() / _SECONDS_PER_DAY)
    return (occurrence - reference).days


def upcoming_birthdays(
    employees: Sequence[Employee],
    today: ReferenceDate,
    window_days: int = DEFAULT_BIRTHDAY_WINDOW_DAYS,
    limit: int = DEFAULT_BIRTHDAY_LIMIT,
) -> List[UpcomingBirthday]:
    """
    Birthdays falling within window_days of today, soonest first.
    The reported age is the age the employee is about to turn.
    """
    calendar_today = today.date() if isinstance(today, datetime) else today

    upcoming: List[UpcomingBirthday] = []
    for emp in employees:
        if emp.birth_date is None:
            continue
        occurrence = next_birthday(emp.birth_date, calendar_today)
        remaining = days_until(occurrence, today)
        if not 0 <= remaining <= window_days:
            continue
        upcoming.append(
            UpcomingBirthday(
                id=emp.id,
                name=emp.name,
                department=extract_department_code(emp.department),
                birth_date=emp.birth_date,
                age=emp.age + 1,
                birth_day=emp.birth_date.day,
                birth_month=_MONTH_ABBR[emp.birth_date.month - 1],
                days_until=remaining,
            )
        )

    upcoming.sort(key=lambda birthday: birthday.days_until)
    return upcoming[:limit]


def dashboard_stats(
    employees: Sequence[Employee], top_limit: int = DEFAULT_TOP_PERFORMER_LIMIT
) -> DashboardStats:
    """Summary card figures plus the department, status and top-performer views."""
    return DashboardStats(
        total_employees=len(employees),
        total_training_hours=sum(emp.training_hours or 0 for emp in employees),
        departments=department_distribution(employees),
        statuses=status_distribution(employees),
        top_performers=top_performers(employees, limit=top_limit),
    )
