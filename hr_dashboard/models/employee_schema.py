"""
Employee Data Schema Definition
Single source of truth for the employees table layout.
Used by the repository for table creation, CSV seeding and row mapping.
"""
from typing import List, Tuple

EMPLOYEES_TABLE = "employees"

Employee_Columns: List[Tuple[str, str]] = [
    ("id", "TEXT PRIMARY KEY NOT NULL"),
    ("name", "TEXT NOT NULL"),
    ("department", "TEXT"),
    ("birth_date", "TEXT"),
    ("age", "INTEGER"),
    ("performance_rating", "REAL"),
    ("training_hours", "INTEGER"),
    ("status", "TEXT"),
]

EMPLOYEE_COLUMN_NAMES: List[str] = [name for name, _ in Employee_Columns]

# (index name, column)
Employee_Indexes: List[Tuple[str, str]] = [
    ("idx_department", "department"),
    ("idx_status", "status"),
    ("idx_name", "name"),
]
