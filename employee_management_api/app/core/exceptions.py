"""
Error taxonomy shared by the stores, the service and the API layer.

Stores and schema validation raise these exceptions; the service lets
them propagate unchanged and the FastAPI app turns them into JSON
responses using ``status_code``.
"""

from typing import Any, List, Optional

from fastapi import status


class EmployeeServiceError(Exception):
    """Base class for errors raised by employee operations."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Employee operation failed"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(EmployeeServiceError):
    """Input data is missing or malformed."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Validation failed"


class NotFoundError(EmployeeServiceError):
    """No employee exists with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Employee not found"

    def __init__(self, message: Optional[str] = None, employee_id: Optional[int] = None) -> None:
        self.employee_id = employee_id
        if message is None and employee_id is not None:
            message = f"Employee {employee_id} not found"
        super().__init__(message)
