"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts against a local SQLite file without any setup.  In a
production deployment override these via environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Directory holding pyproject.toml; relative DATABASE_URL and LOG_FILE
# values are resolved against it.
PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When unset only the console
    # handler is installed.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the employee routes are mounted.  With the
    # default the create endpoint is ``POST /api/employees/create``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Path of the SQLite database.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "employees.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
