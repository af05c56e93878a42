"""
Shared FastAPI dependencies.
"""
from datetime import date
from fastapi import HTTPException, Request
from hr_dashboard.errors import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    EmployeeValidationError,
    HRDashboardError,
)
from hr_dashboard.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


def get_today() -> date:
    """Reference date for age and birthday calculations (overridden in tests)."""
    return date.today()


_STATUS_CODES = {
    EmployeeNotFoundError: 404,
    DuplicateEmployeeError: 409,
    EmployeeValidationError: 400,
}


def to_http_exception(error: HRDashboardError) -> HTTPException:
    """Map a service error to the matching HTTP status; storage failures are 500."""
    status_code = _STATUS_CODES.get(type(error), 500)
    return HTTPException(status_code=status_code, detail=error.message)
