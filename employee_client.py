"""Employee API client.

A thin wrapper around the Employee REST API using the ``requests``
library.  Every public method returns a tuple ``(data, error)``: on
success ``error`` is ``None``; on failure ``data`` is ``None`` (or an
empty list) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.

Example::

    client = EmployeeAPIClient(base_url="http://localhost:8000")
    employee, error = client.create_employee(
        {"firstName": "Rodrigo", "lastName": "Rodrigo1", "email": "rodrigo1@gmail.com"}
    )
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class EmployeeAPIClient:
    """Client for the ``/employees`` endpoints of the Employee API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/employees",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path under which the employee routes are mounted.
            timeout: Timeout in seconds for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request against an employee route.

        JSON responses are decoded; any other non-empty body is
        returned as text.
        """
        url = f"{self.base_url}{self.prefix}/{path.lstrip('/')}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if response.headers.get("content-type", "").startswith("application/json"):
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create an employee.  A duplicate email yields a 409 error."""
        return self._request("POST", "create", json_body=payload)

    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", "getAll")
        if error:
            return [], error
        return data or [], None

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"getById/{employee_id}")

    def find_employee_by_name(
        self, first_name: str, last_name: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request(
            "GET", "getByName", params={"firstName": first_name, "lastName": last_name}
        )

    def update_employee(
        self, employee_id: int, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Replace first name, last name and email of an employee."""
        return self._request("PUT", f"update/{employee_id}", json_body=payload)

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete an employee.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"delete/{employee_id}")
        if error:
            return False, error
        return True, None
