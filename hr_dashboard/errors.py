"""
Error kinds raised by the repository and service layers.
Controllers map each kind to an HTTP status code.
"""


class HRDashboardError(Exception):
    """Base error carrying a human-readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmployeeNotFoundError(HRDashboardError):
    def __init__(self, employee_id: str):
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class DuplicateEmployeeError(HRDashboardError):
    def __init__(self, employee_id: str):
        super().__init__(f"Employee already exists: {employee_id}")
        self.employee_id = employee_id


class EmployeeValidationError(HRDashboardError):
    pass


class RepositoryError(HRDashboardError):
    """Storage failure (connection, SQL error)."""
    pass
