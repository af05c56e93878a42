"""
Employee Service
Business logic between the HTTP controllers and the repository.
"""
from datetime import date
from typing import List, Optional
from hr_dashboard.config.logging_config import get_logger
from hr_dashboard.config.settings import Settings
from hr_dashboard.errors import EmployeeValidationError
from hr_dashboard.models.employee_models import Employee, EmployeePayload
from hr_dashboard.models.stats_models import DashboardStats, UpcomingBirthday
from hr_dashboard.repositories.employee_repository import EmployeeRepository
from hr_dashboard.services import stats_service
from hr_dashboard.utils.date_utils import calculate_age

logger = get_logger(__name__)


class EmployeeService:
    def __init__(self, repository: EmployeeRepository, settings: Settings):
        self.repository = repository
        self.settings = settings

    # Reads
    def list_employees(
        self, department: Optional[str] = None, status: Optional[str] = None
    ) -> List[Employee]:
        """All employees, or those matching one filter (department wins if both given)."""
        if department:
            return self.repository.get_by_department(department)
        if status:
            return self.repository.get_by_status(status)
        return self.repository.get_all()

    def get_employee(self, employee_id: str) -> Employee:
        return self.repository.get_by_id(employee_id)

    def next_id(self) -> str:
        return self.repository.generate_next_id()

    # Writes
    @staticmethod
    def _validate(payload: EmployeePayload, today: date) -> None:
        if not payload.name.strip():
            raise EmployeeValidationError("Employee name is required")
        if payload.birth_date and payload.birth_date > today:
            raise EmployeeValidationError("Birth date cannot be in the future")

    def _to_record(self, employee_id: str, payload: EmployeePayload, today: date) -> Employee:
        return Employee(
            id=employee_id,
            name=payload.name.strip(),
            department=payload.department.strip(),
            birth_date=payload.birth_date,
            age=calculate_age(payload.birth_date, today),
            performance_rating=payload.performance_rating,
            training_hours=payload.training_hours,
            status=payload.status,
        )

    def create_employee(self, payload: EmployeePayload, today: date) -> Employee:
        """Insert a new employee; an id is generated when the payload has none."""
        self._validate(payload, today)
        employee_id = payload.id or self.repository.generate_next_id()
        return self.repository.create(self._to_record(employee_id, payload, today))

    def update_employee(self, employee_id: str, payload: EmployeePayload, today: date) -> Employee:
        """Replace every mutable field of an existing employee."""
        if payload.id and payload.id != employee_id:
            raise EmployeeValidationError(
                f"Payload id {payload.id} does not match path id {employee_id}"
            )
        self._validate(payload, today)
        return self.repository.update(self._to_record(employee_id, payload, today))

    def delete_employee(self, employee_id: str) -> None:
        self.repository.delete(employee_id)

    # Derived views
    def dashboard_stats(self) -> DashboardStats:
        employees = self.repository.get_all()
        return stats_service.dashboard_stats(
            employees, top_limit=self.settings.top_performer_limit
        )

    def upcoming_birthdays(self, today: date) -> List[UpcomingBirthday]:
        employees = self.repository.get_all()
        birthdays = stats_service.upcoming_birthdays(
            employees,
            today,
            window_days=self.settings.birthday_window_days,
            limit=self.settings.birthday_limit,
        )
        logger.debug("Found %d upcoming birthdays", len(birthdays))
        return birthdays
