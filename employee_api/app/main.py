"""
Main entrypoint for the Employee API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn employee_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import EmployeeAPIException, employee_api_exception_handler
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the database file if needed and brings the schema up to date.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the handler for
    ``EmployeeAPIException`` and mounts the employee routes under
    ``settings.api_prefix``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(EmployeeAPIException, employee_api_exception_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
