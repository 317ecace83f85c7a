"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  SQLite is used as an embedded relational store; to
switch to another DBMS you would replace the connection logic and
adapt the SQL in the repository module.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from .config import PROJECT_ROOT, settings

logger = logging.getLogger(__name__)


# Ordered list of ``(version, sql)`` scripts.  Append new migrations
# with an incremented version number; never edit an applied one.
MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS employees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            email TEXT NOT NULL
        );
        """,
    ),
    (
        2,
        """
        -- Lookup index for the duplicate check on create.  Not UNIQUE:
        -- email uniqueness is enforced by EmployeeService.
        CREATE INDEX IF NOT EXISTS idx_employees_email ON employees(email);
        """,
    ),
]


MEMORY_DATABASE = ":memory:"

# Every store call opens its own connection, so ``:memory:`` maps to one
# named shared-cache database.  SQLite drops such a database when its
# last connection closes; ``_memory_anchor`` stays open to keep it.
_MEMORY_URI = "file:employee_api_memdb?mode=memory&cache=shared"
_memory_anchor: Optional[sqlite3.Connection] = None


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path (or the special
    ``:memory:`` name), use it directly.  Otherwise resolve it relative
    to the project root.
    """
    db_url = settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    return str((PROJECT_ROOT / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The path is read from settings on every call.  Rows are returned as
    ``sqlite3.Row`` so columns can be accessed by name.  All
    connections made while ``DATABASE_URL`` is ``:memory:`` share one
    in-memory database that lives until ``close_memory_database``.
    """
    global _memory_anchor
    db_path = get_database_path()
    if db_path == MEMORY_DATABASE:
        if _memory_anchor is None:
            _memory_anchor = sqlite3.connect(_MEMORY_URI, uri=True, check_same_thread=False)
        conn = sqlite3.connect(_MEMORY_URI, uri=True)
    else:
        conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def close_memory_database() -> None:
    """Discard the shared in-memory database, if one is open."""
    global _memory_anchor
    if _memory_anchor is not None:
        _memory_anchor.close()
        _memory_anchor = None


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, reads the
    current schema version and applies every entry of ``MIGRATIONS``
    newer than it.  Returns the schema version after the run.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version

    return current_version
