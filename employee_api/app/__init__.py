"""
Application package initializer.

The application is organised in layers: ``api`` (HTTP routes),
``services`` (business rules), ``repositories`` (SQL) and ``schemas``
(pydantic models), with shared configuration, database and logging
code under ``core``.
"""

from .main import app  # noqa: F401
