"""
Response envelopes for API endpoints.
"""
from hr_dashboard.models.employee_models import CamelModel, Employee


class MessageResponse(CamelModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str


class CreateEmployeeResponse(CamelModel):
    message: str
    id: str
    employee: Employee


class UpdateEmployeeResponse(CamelModel):
    message: str
    employee: Employee


class NextIdResponse(CamelModel):
    next_id: str
