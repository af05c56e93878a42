"""
Dashboard view models.
Recomputed on every request and never persisted.
"""
from datetime import date
from typing import List
from hr_dashboard.models.employee_models import CamelModel


class DepartmentCount(CamelModel):
    name: str
    count: int


class StatusCount(CamelModel):
    name: str
    count: int


class TopPerformer(CamelModel):
    id: str
    name: str
    department: str
    performance_rating: float


class UpcomingBirthday(CamelModel):
    id: str
    name: str
    department: str
    birth_date: date
    age: int  # age the employee turns on the upcoming birthday
    birth_day: int
    birth_month: str  # short English month name, e.g. "Jan"
    days_until: int


class DashboardStats(CamelModel):
    total_employees: int
    total_training_hours: int
    departments: List[DepartmentCount] = []
    statuses: List[StatusCount] = []
    top_performers: List[TopPerformer] = []
