"""
Persistence for employee records.

``EmployeeRepository`` is the only code that knows the layout of the
``employees`` table.  Each method opens its own connection, runs a
parameterised statement and closes the connection again; there is no
transaction spanning several calls.  Database errors are not caught
here and reach the caller unchanged.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from employee_api.app.core.db import get_connection
from employee_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)

_COLUMNS = "id, first_name, last_name, email"


class EmployeeRepository:
    """Store for ``Employee`` records backed by the ``employees`` table."""

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id``, or ``None``."""
        return self._fetch_one(
            f"SELECT {_COLUMNS} FROM employees WHERE id = ?", (employee_id,)
        )

    def find_by_email(self, email: str) -> Optional[Employee]:
        """Return the lowest-id employee using ``email``, or ``None``."""
        return self._fetch_one(
            f"SELECT {_COLUMNS} FROM employees WHERE email = ? ORDER BY id LIMIT 1",
            (email,),
        )

    def find_by_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        """Return the first employee with the given first and last name."""
        return self._fetch_one(
            f"SELECT {_COLUMNS} FROM employees "
            "WHERE first_name = ? AND last_name = ? ORDER BY id LIMIT 1",
            (first_name, last_name),
        )

    def find_all(self) -> List[Employee]:
        """Return every employee ordered by id."""
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM employees ORDER BY id"
            ).fetchall()
            return [self._row_to_employee(row) for row in rows]
        finally:
            conn.close()

    def save(self, employee: Employee) -> Employee:
        """Insert or update ``employee`` and return it as stored.

        A record without an id (``0``) is inserted and the returned
        copy carries the id assigned by SQLite.  A record with an id
        replaces the name and email of that row; if the row is gone it
        is written back under the same id.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if not employee.id:
                cursor.execute(
                    "INSERT INTO employees (first_name, last_name, email) VALUES (?, ?, ?)",
                    (employee.first_name, employee.last_name, employee.email),
                )
                employee_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO employees (id, first_name, last_name, email)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        first_name = excluded.first_name,
                        last_name = excluded.last_name,
                        email = excluded.email
                    """,
                    (employee.id, employee.first_name, employee.last_name, employee.email),
                )
                employee_id = employee.id
            conn.commit()
            logger.debug("Saved employee %s", employee_id)
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE id = ?", (employee_id,)
            ).fetchone()
            return self._row_to_employee(row)
        finally:
            conn.close()

    def delete_by_id(self, employee_id: int) -> None:
        """Delete the row with ``employee_id``; a missing row is not an error."""
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            conn.commit()
            if cursor.rowcount:
                logger.debug("Deleted employee %s", employee_id)
        finally:
            conn.close()

    def delete(self, employee: Employee) -> None:
        """Delete the row carrying ``employee.id``."""
        self.delete_by_id(employee.id)

    def _fetch_one(self, query: str, params: tuple) -> Optional[Employee]:
        conn = get_connection()
        try:
            row = conn.execute(query, params).fetchone()
            if not row:
                return None
            return self._row_to_employee(row)
        finally:
            conn.close()

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> Employee:
        """Convert a database row to an ``Employee``."""
        return Employee(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
