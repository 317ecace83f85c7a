"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persistence code so that the API
representation (camelCase JSON) is decoupled from the table layout.
"""

from .employee import Employee, EmployeeCreate, EmployeeUpdate

__all__ = ["Employee", "EmployeeCreate", "EmployeeUpdate"]
