"""Employee Management API client.

A thin wrapper around the versioned REST API served by
``employee_management_api``.  It exposes the same five operations as
the service layer:

* :meth:`EmployeeAPIClient.add_employee`
* :meth:`EmployeeAPIClient.get_all_employees`
* :meth:`EmployeeAPIClient.get_employee_by_id`
* :meth:`EmployeeAPIClient.update_employee`
* :meth:`EmployeeAPIClient.delete_employee_by_id`

Records are exchanged as plain dictionaries.  HTTP 404 and 422
responses are raised as the service's ``NotFoundError`` and
``ValidationError`` so callers handle remote and local failures the
same way; any other failure raises the underlying ``requests``
exception.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from employee_management_api.app.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class EmployeeAPIClient:
    """Client for the ``/api/v1/employees`` endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Any:
        """Perform an HTTP request and return the decoded JSON body (or ``None``)."""
        url = f"{self.base_url}/api/v1/employees{path}"
        logger.debug("Sending %s request to %s", method, url)
        response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
        if response.status_code in (404, 422):
            message = self._error_message(response)
            logger.error("API request failed (%s): %s", response.status_code, message)
            if response.status_code == 404:
                raise NotFoundError(message)
            raise ValidationError(message)
        response.raise_for_status()
        if response.content:
            return response.json()
        return None

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason
        if isinstance(body, dict):
            return body.get("message") or body.get("detail") or str(body)
        return str(body)

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def add_employee(self, employee: Dict[str, Any]) -> Dict[str, Any]:
        """Create an employee and return it with its assigned id."""
        return self._request("POST", "/", json_body=employee)

    def get_all_employees(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/") or []

    def get_employee_by_id(self, employee_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/{employee_id}")

    def update_employee(self, employee: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the employee identified by ``employee["id"]``."""
        employee_id = employee.get("id")
        if not employee_id:
            raise ValidationError("Employee id is required for an update")
        return self._request("PUT", f"/{employee_id}", json_body=employee)

    def delete_employee_by_id(self, employee_id: int) -> None:
        self._request("DELETE", f"/{employee_id}")
