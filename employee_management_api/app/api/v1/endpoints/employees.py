"""
Employee endpoints for API v1.

These routes expose CRUD operations on employee records.  Handlers
are plain functions: FastAPI runs them in its thread pool, which keeps
blocking store calls off the event loop.  ``NotFoundError`` and
``ValidationError`` raised by the service are turned into 404 and 422
responses by the application's exception handler.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from employee_management_api.app.api.deps import get_employee_service
from employee_management_api.app.core.exceptions import ValidationError
from employee_management_api.app.schemas.employee import (
    MAX_EMPLOYEE_ID,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)
from employee_management_api.app.services.employee_service import EmployeeService

router = APIRouter()


@router.get("/", response_model=List[EmployeeRead])
def list_employees(service: EmployeeService = Depends(get_employee_service)) -> List[EmployeeRead]:
    """Return all employees ordered by id."""
    return service.get_all_employees()


@router.post("/", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Create an employee.

    Leave ``id`` at 0 (or omit it) to have one assigned.
    """
    return service.add_employee(employee_in)


@router.get("/{employee_id}", response_model=EmployeeRead)
def get_employee(
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Retrieve a single employee; 404 if it does not exist."""
    return service.get_employee_by_id(employee_id)


@router.put("/{employee_id}", response_model=EmployeeRead)
def update_employee(
    employee_in: EmployeeUpdate,
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Replace an employee's fields.

    The id in the path is authoritative; a different id in the body
    is rejected.  Omitting ``password`` keeps the current one.
    """
    if employee_in.id is not None and employee_in.id != employee_id:
        raise ValidationError(
            f"Body id {employee_in.id} does not match path id {employee_id}"
        )
    return service.update_employee(employee_in.model_copy(update={"id": employee_id}))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int = Path(..., ge=1, le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    """Delete an employee; 404 if it does not exist."""
    service.delete_employee_by_id(employee_id)
