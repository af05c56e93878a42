"""
Employee Controller
Handles HTTP requests for employee CRUD and next-id generation.
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from hr_dashboard.controllers.dependencies import get_employee_service, get_today, to_http_exception
from hr_dashboard.errors import HRDashboardError
from hr_dashboard.models.employee_models import Employee, EmployeePayload
from hr_dashboard.models.request_models import (
    CreateEmployeeResponse,
    MessageResponse,
    NextIdResponse,
    UpdateEmployeeResponse,
)
from hr_dashboard.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=List[Employee])
def list_employees(
    department: Optional[str] = None,
    status: Optional[str] = None,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    List all employees.
    Optional `department` (full label or code) or `status` filters narrow the result.
    """
    try:
        return service.list_employees(department=department, status=status)
    except HRDashboardError as e:
        raise to_http_exception(e)


@router.get("/next-id", response_model=NextIdResponse)
def get_next_id(service: EmployeeService = Depends(get_employee_service)):
    """Id the next created employee should receive."""
    try:
        return NextIdResponse(next_id=service.next_id())
    except HRDashboardError as e:
        raise HTTPException(status_code=500, detail=f"Error generating next ID: {e.message}")


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    try:
        return service.get_employee(employee_id)
    except HRDashboardError as e:
        raise to_http_exception(e)


@router.post("", response_model=CreateEmployeeResponse, status_code=201)
def create_employee(
    payload: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
    today: date = Depends(get_today),
):
    try:
        employee = service.create_employee(payload, today)
    except HRDashboardError as e:
        raise to_http_exception(e)
    return CreateEmployeeResponse(
        message="Employee created successfully", id=employee.id, employee=employee
    )


@router.put("/{employee_id}", response_model=UpdateEmployeeResponse)
def update_employee(
    employee_id: str,
    payload: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
    today: date = Depends(get_today),
):
    """Full replace of an employee's mutable fields."""
    try:
        employee = service.update_employee(employee_id, payload, today)
    except HRDashboardError as e:
        raise to_http_exception(e)
    return UpdateEmployeeResponse(message="Employee updated successfully", employee=employee)


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    try:
        service.delete_employee(employee_id)
    except HRDashboardError as e:
        raise to_http_exception(e)
    return MessageResponse(message="Employee deleted successfully")
