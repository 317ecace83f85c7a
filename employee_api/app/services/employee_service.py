"""
Business logic for employees.

The only rule enforced here is that two employees may not share an
email address.  The check runs on create only and is a separate read
before the insert, so two concurrent creates with the same email can
both pass it.  Updates are stored as given.
"""

import logging
from typing import List, Optional

from employee_api.app.core.exceptions import DuplicateEmailError
from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for managing employee records."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def save_employee(self, employee: Employee) -> Employee:
        """Store a new employee and return it with its assigned id.

        Raises ``DuplicateEmailError`` if an employee with the same
        email already exists; nothing is written in that case.
        """
        if self.repository.find_by_email(employee.email) is not None:
            logger.warning("Rejected employee with duplicate email %s", employee.email)
            raise DuplicateEmailError(employee.email)
        saved = self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def get_all_employees(self) -> List[Employee]:
        return self.repository.find_all()

    async def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""
        return self.repository.find_by_id(employee_id)

    async def get_employee_by_name(self, first_name: str, last_name: str) -> Optional[Employee]:
        return self.repository.find_by_name(first_name, last_name)

    async def update_employee(self, employee: Employee) -> Employee:
        """Persist an already located and modified employee."""
        updated = self.repository.save(employee)
        logger.info("Updated employee %s", updated.id)
        return updated

    async def delete_employee(self, employee_id: int) -> None:
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
