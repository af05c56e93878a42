"""
Employee Data Repository
Handles all employee database operations.

One method per logical query; callers never see SQL or sqlite3 types.
"""
import csv
import os
import re
import sqlite3
from contextlib import closing, contextmanager
from datetime import date
from typing import Iterator, List, Optional
from hr_dashboard.config.logging_config import get_logger
from hr_dashboard.errors import DuplicateEmployeeError, EmployeeNotFoundError, RepositoryError
from hr_dashboard.models.employee_models import Employee
from hr_dashboard.models.employee_schema import (
    EMPLOYEE_COLUMN_NAMES,
    EMPLOYEES_TABLE,
    Employee_Columns,
    Employee_Indexes,
)
from hr_dashboard.utils.date_utils import calculate_age, parse_date

logger = get_logger(__name__)

_SELECT_COLUMNS = ", ".join(EMPLOYEE_COLUMN_NAMES)


def _create_schema(cur: sqlite3.Cursor) -> None:
    columns_sql = ", ".join([f"{name} {ctype}" for name, ctype in Employee_Columns])
    cur.execute(f"CREATE TABLE IF NOT EXISTS {EMPLOYEES_TABLE} ({columns_sql});")
    for index_name, column in Employee_Indexes:
        cur.execute(f"CREATE INDEX IF NOT EXISTS {index_name} ON {EMPLOYEES_TABLE}({column});")


def _seed_from_csv(cur: sqlite3.Cursor, csv_path: str, today: date) -> int:
    """Load employees from a CSV whose headers match the column names."""
    with open(csv_path, "r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = []
        for row in reader:
            values = {col: (row.get(col) or "").strip() or None for col in EMPLOYEE_COLUMN_NAMES}
            if values["id"] is None:
                raise RepositoryError(f"{csv_path}: line {reader.line_num} has no employee id")
            values["age"] = calculate_age(parse_date(values["birth_date"]), today)
            rows.append(tuple(values[col] for col in EMPLOYEE_COLUMN_NAMES))

    placeholders = ", ".join(["?"] * len(EMPLOYEE_COLUMN_NAMES))
    cur.executemany(
        f"INSERT INTO {EMPLOYEES_TABLE} ({_SELECT_COLUMNS}) VALUES ({placeholders});",
        rows,
    )
    return len(rows)


def ensure_employee_db(
    db_path: str,
    csv_path: Optional[str] = None,
    create_if_missing: bool = True,
    today: Optional[date] = None,
) -> str:
    """
    Ensure the SQLite DB exists with the employees table and its indexes.
    A newly created DB is seeded from csv_path when one is given; if seeding
    fails the new file is removed so the next start seeds again.
    Returns the db_path.
    """
    is_new = not os.path.exists(db_path)
    if is_new and not create_if_missing:
        raise RepositoryError(f"Employee database not found: {db_path}")
    if is_new and csv_path and not os.path.exists(csv_path):
        raise FileNotFoundError(f"Employee CSV not found: {csv_path}")

    try:
        with closing(sqlite3.connect(db_path)) as conn:
            cur = conn.cursor()
            _create_schema(cur)
            if is_new and csv_path:
                seeded = _seed_from_csv(cur, csv_path, today or date.today())
                logger.info("Seeded %d employees from %s", seeded, csv_path)
            conn.commit()
    except (sqlite3.Error, RepositoryError) as e:
        if is_new and os.path.exists(db_path):
            os.remove(db_path)
            logger.warning("Removed partially initialised database: %s", db_path)
        if isinstance(e, RepositoryError):
            raise
        raise RepositoryError(f"Could not initialise employee database: {e}") from e

    if is_new:
        logger.info("Database created with indexes: %s", db_path)
    return db_path


class EmployeeRepository:
    """SQLite-backed store for employee records."""

    def __init__(self, db_path: str, id_prefix: str = "EMP", id_width: int = 4):
        self.db_path = db_path
        self.id_prefix = id_prefix
        self.id_width = id_width
        self._id_pattern = re.compile(rf"^{re.escape(id_prefix)}-(\d+)$")

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Open a connection for one logical operation; commits on success."""
        try:
            with closing(sqlite3.connect(self.db_path)) as conn:
                conn.row_factory = sqlite3.Row
                with conn:
                    yield conn
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as e:
            logger.error("SQL execution error: %s", e)
            raise RepositoryError(f"Database error: {e}") from e

    def _query(self, sql: str, params: tuple = ()) -> List[Employee]:
        with self._connection() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [Employee.model_validate(dict(row)) for row in rows]

    @staticmethod
    def _values(employee: Employee) -> tuple:
        return (
            employee.id,
            employee.name,
            employee.department,
            employee.birth_date.isoformat() if employee.birth_date else None,
            employee.age,
            employee.performance_rating,
            employee.training_hours,
            employee.status,
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_all(self) -> List[Employee]:
        return self._query(f"SELECT {_SELECT_COLUMNS} FROM {EMPLOYEES_TABLE} ORDER BY id;")

    def get_by_id(self, employee_id: str) -> Employee:
        found = self._query(
            f"SELECT {_SELECT_COLUMNS} FROM {EMPLOYEES_TABLE} WHERE id = ?;", (employee_id,)
        )
        if not found:
            raise EmployeeNotFoundError(employee_id)
        return found[0]

    def get_by_department(self, department: str) -> List[Employee]:
        """Match the full department label or its parenthesized code ("CYDD")."""
        return self._query(
            f"SELECT {_SELECT_COLUMNS} FROM {EMPLOYEES_TABLE} "
            "WHERE department = ? OR instr(department, ?) > 0 ORDER BY id;",
            (department, f"({department})"),
        )

    def get_by_status(self, status: str) -> List[Employee]:
        return self._query(
            f"SELECT {_SELECT_COLUMNS} FROM {EMPLOYEES_TABLE} WHERE status = ? ORDER BY id;",
            (status,),
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, employee: Employee) -> Employee:
        placeholders = ", ".join(["?"] * len(EMPLOYEE_COLUMN_NAMES))
        try:
            with self._connection() as conn:
                conn.execute(
                    f"INSERT INTO {EMPLOYEES_TABLE} ({_SELECT_COLUMNS}) VALUES ({placeholders});",
                    self._values(employee),
                )
        except sqlite3.IntegrityError as e:
            raise DuplicateEmployeeError(employee.id) from e
        logger.info("Created employee %s", employee.id)
        return self.get_by_id(employee.id)

    def update(self, employee: Employee) -> Employee:
        assignments = ", ".join(f"{col} = ?" for col in EMPLOYEE_COLUMN_NAMES[1:])
        values = self._values(employee)
        try:
            with self._connection() as conn:
                cur = conn.execute(
                    f"UPDATE {EMPLOYEES_TABLE} SET {assignments} WHERE id = ?;",
                    values[1:] + (employee.id,),
                )
                updated = cur.rowcount
        except sqlite3.IntegrityError as e:
            raise RepositoryError(f"Error updating employee: {e}") from e
        if updated == 0:
            raise EmployeeNotFoundError(employee.id)
        logger.info("Updated employee %s", employee.id)
        return self.get_by_id(employee.id)

    def delete(self, employee_id: str) -> None:
        with self._connection() as conn:
            cur = conn.execute(f"DELETE FROM {EMPLOYEES_TABLE} WHERE id = ?;", (employee_id,))
            deleted = cur.rowcount
        if deleted == 0:
            raise EmployeeNotFoundError(employee_id)
        logger.info("Deleted employee %s", employee_id)

    # ------------------------------------------------------------------
    # ID generation
    # ------------------------------------------------------------------
    def generate_next_id(self) -> str:
        """Highest existing numeric suffix for the prefix, plus one."""
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT id FROM {EMPLOYEES_TABLE} WHERE id LIKE ?;", (f"{self.id_prefix}-%",)
            ).fetchall()

        highest = 0
        for row in rows:
            match = self._id_pattern.match(row["id"])
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{self.id_prefix}-{highest + 1:0{self.id_width}d}"
