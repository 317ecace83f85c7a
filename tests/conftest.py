# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures for all tests:
# - A throwaway SQLite database per test (settings retargeted + migrated)
# - Sample employees mirroring the records used across the suite
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.core.config reads the environment once, at import time.

os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DATABASE_URL", ":memory:")

import pytest

from employee_api.app.core.config import settings
from employee_api.app.core.db import init_db
from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee

FIRST_NAME = "Rodrigo"
LAST_NAME_1 = "Rodrigo1"
LAST_NAME_2 = "Rodrigo2"
EMAIL_1 = "rodrigo1@gmail.com"
EMAIL_2 = "rodrigo2@gmail.com"


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh, migrated SQLite file."""
    db_path = tmp_path / "employees_test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def repository(database):
    """EmployeeRepository bound to the per-test database."""
    return EmployeeRepository()


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def employee1():
    """Stored employee with id 1."""
    return Employee(id=1, first_name=FIRST_NAME, last_name=LAST_NAME_1, email=EMAIL_1)


@pytest.fixture
def employee2():
    """Stored employee with id 2."""
    return Employee(id=2, first_name=FIRST_NAME, last_name=LAST_NAME_2, email=EMAIL_2)


@pytest.fixture
def new_employee1():
    """Unsaved version of employee1."""
    return Employee(first_name=FIRST_NAME, last_name=LAST_NAME_1, email=EMAIL_1)


@pytest.fixture
def new_employee2():
    """Unsaved version of employee2."""
    return Employee(first_name=FIRST_NAME, last_name=LAST_NAME_2, email=EMAIL_2)


@pytest.fixture
def payload1():
    """JSON body for creating employee1."""
    return {"firstName": FIRST_NAME, "lastName": LAST_NAME_1, "email": EMAIL_1}


@pytest.fixture
def payload2():
    """JSON body carrying employee2's fields."""
    return {"firstName": FIRST_NAME, "lastName": LAST_NAME_2, "email": EMAIL_2}
