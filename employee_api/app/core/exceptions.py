"""
Custom exceptions and their HTTP mapping.

Business-rule violations are raised by the service layer as subclasses
of ``EmployeeAPIException``.  ``create_app`` registers
``employee_api_exception_handler`` so that each of them turns into a
JSON error response with the status code the exception carries.

"Not found" is not an exception: services return ``None`` and the
endpoints decide how to respond.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EmployeeAPIException(Exception):
    """Base exception for the Employee API."""

    def __init__(
        self,
        message: str,
        code: str = "EMPLOYEE_API_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API response dict."""
        result: Dict[str, Any] = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


class DuplicateEmailError(EmployeeAPIException):
    """Raised when creating an employee whose email is already stored."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Employee already exists with given email: {email}",
            code="DUPLICATE_EMAIL",
            status_code=status.HTTP_409_CONFLICT,
            details={"email": email},
        )
        self.email = email


async def employee_api_exception_handler(
    request: Request, exc: EmployeeAPIException
) -> JSONResponse:
    """Render an ``EmployeeAPIException`` as a JSON error response."""
    logger.warning(
        "%s %s failed: [%s] %s",
        request.method,
        request.url.path,
        exc.code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
