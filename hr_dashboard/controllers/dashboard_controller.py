"""
Dashboard Controller
Serves the derived views: summary stats and upcoming birthdays.
"""
from datetime import date
from typing import List
from fastapi import APIRouter, Depends
from hr_dashboard.controllers.dependencies import get_employee_service, get_today, to_http_exception
from hr_dashboard.errors import HRDashboardError
from hr_dashboard.models.stats_models import DashboardStats, UpcomingBirthday
from hr_dashboard.services.employee_service import EmployeeService

router = APIRouter(tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(service: EmployeeService = Depends(get_employee_service)):
    """Totals, department and status distribution, and top performers."""
    try:
        return service.dashboard_stats()
    except HRDashboardError as e:
        raise to_http_exception(e)


@router.get("/birthdays", response_model=List[UpcomingBirthday])
def get_upcoming_birthdays(
    service: EmployeeService = Depends(get_employee_service),
    today: date = Depends(get_today),
):
    try:
        return service.upcoming_birthdays(today)
    except HRDashboardError as e:
        raise to_http_exception(e)
