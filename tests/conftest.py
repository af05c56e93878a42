"""
conftest.py — Shared pytest fixtures for the HR Dashboard test suite.

Every test gets its own SQLite file under pytest's tmp_path, so tests never
share state and never touch a developer's local database.
"""

import os
import sys
from datetime import date

import pytest

# ---------------------------------------------------------------------------
# Ensure the project root is on the import path before any package imports.
# ---------------------------------------------------------------------------
_ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from hr_dashboard.config.settings import Settings  # noqa: E402
from hr_dashboard.models.employee_models import Employee  # noqa: E402

# Fixed reference date used wherever "today" matters.
TODAY = date(2025, 3, 10)


def make_employee(employee_id="EMP-0001", **overrides) -> Employee:
    """Employee record with sensible defaults; override any field by name."""
    fields = {
        "id": employee_id,
        "name": f"Employee {employee_id}",
        "department": "(CYDD) Child and Youth Development Division",
        "birth_date": None,
        "age": 30,
        "performance_rating": None,
        "training_hours": None,
        "status": "Permanent",
    }
    fields.update(overrides)
    return Employee(**fields)


@pytest.fixture
def settings(tmp_path):
    return Settings(env="dev", db_path=str(tmp_path / "employees.db"))


@pytest.fixture
def repository(settings):
    from hr_dashboard.repositories.employee_repository import EmployeeRepository, ensure_employee_db

    ensure_employee_db(settings.db_path)
    return EmployeeRepository(settings.db_path)


@pytest.fixture
def service(repository, settings):
    from hr_dashboard.services.employee_service import EmployeeService

    return EmployeeService(repository, settings)


@pytest.fixture
def client(settings):
    """TestClient around a fresh app whose reference date is pinned to TODAY."""
    from fastapi.testclient import TestClient
    from hr_dashboard.controllers.dependencies import get_today
    from hr_dashboard.main import create_app

    app = create_app(settings)
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as test_client:
        yield test_client
