"""
SQLite employee store.

Each operation opens its own connection through ``core.db`` and
closes it before returning, so the store is safe to share between
request threads.  All queries use parameterized statements.  Ids are
assigned by ``INTEGER PRIMARY KEY AUTOINCREMENT``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from employee_management_api.app.core.db import get_connection, get_database_path, init_db
from employee_management_api.app.core.exceptions import NotFoundError, ValidationError
from employee_management_api.app.schemas.employee import MAX_EMPLOYEE_ID, PROFILE_FIELDS, EmployeeRead
from employee_management_api.app.stores.base import EmployeeStore

logger = logging.getLogger(__name__)

_COLUMNS = ", ".join(PROFILE_FIELDS)
_PLACEHOLDERS = ", ".join("?" for _ in PROFILE_FIELDS)


class SQLiteEmployeeStore(EmployeeStore):
    """Employee store backed by the ``employees`` table."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = get_database_path(database_path)

    def initialize(self) -> None:
        version = init_db(self.database_path)
        logger.info("Employee database ready at %s (schema version %s)", self.database_path, version)

    def create(
        self,
        profile: Dict[str, Any],
        password_hash: str,
        employee_id: Optional[int] = None,
    ) -> EmployeeRead:
        if employee_id is not None and not 0 < employee_id <= MAX_EMPLOYEE_ID:
            raise ValidationError(f"Employee id {employee_id} is out of range")
        values = [profile[name] for name in PROFILE_FIELDS]
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            if employee_id is None:
                cursor.execute(
                    f"INSERT INTO employees ({_COLUMNS}, password_hash) "
                    f"VALUES ({_PLACEHOLDERS}, ?)",
                    (*values, password_hash),
                )
                employee_id = cursor.lastrowid
            else:
                try:
                    cursor.execute(
                        f"INSERT INTO employees (id, {_COLUMNS}, password_hash) "
                        f"VALUES (?, {_PLACEHOLDERS}, ?)",
                        (employee_id, *values, password_hash),
                    )
                except sqlite3.IntegrityError:
                    raise ValidationError(f"Employee with id {employee_id} already exists")
            conn.commit()
            logger.info("Created employee %s", employee_id)
            row = cursor.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
            return self._row_to_employee(row)
        finally:
            conn.close()

    def list(self) -> List[EmployeeRead]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute("SELECT * FROM employees ORDER BY id ASC").fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def get(self, employee_id: int) -> EmployeeRead:
        return self._row_to_employee(self._fetch(employee_id))

    def update(
        self,
        employee_id: int,
        profile: Dict[str, Any],
        password_hash: Optional[str] = None,
    ) -> EmployeeRead:
        assignments = [f"{name} = ?" for name in PROFILE_FIELDS]
        values: List[Any] = [profile[name] for name in PROFILE_FIELDS]
        if password_hash is not None:
            assignments.append("password_hash = ?")
            values.append(password_hash)
        values.append(employee_id)
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    f"UPDATE employees SET {', '.join(assignments)}, updated_at = CURRENT_TIMESTAMP "
                    "WHERE id = ?",
                    tuple(values),
                )
            except OverflowError:
                raise NotFoundError(employee_id=employee_id)
            if cursor.rowcount == 0:
                raise NotFoundError(employee_id=employee_id)
            conn.commit()
            logger.info("Updated employee %s", employee_id)
            row = cursor.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
            return self._row_to_employee(row)
        finally:
            conn.close()

    def delete(self, employee_id: int) -> None:
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            try:
                cursor.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            except OverflowError:
                raise NotFoundError(employee_id=employee_id)
            if cursor.rowcount == 0:
                raise NotFoundError(employee_id=employee_id)
            conn.commit()
            logger.info("Deleted employee %s", employee_id)
        finally:
            conn.close()

    def get_password_hash(self, employee_id: int) -> str:
        return self._fetch(employee_id)["password_hash"]

    def _fetch(self, employee_id: int) -> sqlite3.Row:
        conn = get_connection(self.database_path)
        try:
            row = conn.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
        except OverflowError:
            # Outside the 64-bit INTEGER range, so no row can have it.
            row = None
        finally:
            conn.close()
        if row is None:
            raise NotFoundError(employee_id=employee_id)
        return row

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> EmployeeRead:
        """Convert a database row to an EmployeeRead schema instance."""
        return EmployeeRead(id=row["id"], **{name: row[name] for name in PROFILE_FIELDS})
