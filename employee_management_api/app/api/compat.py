"""
Compatibility routes for the existing web client.

The React employee manager talks to ``/employeeapi`` with verb‑style
paths (``/add``, ``/all``, ``/get/{id}``, ``/update``, ``/delete/{id}``)
and shows the body of the delete response as a message.  These routes
map those calls onto the same service as the versioned API.
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse

from employee_management_api.app.api.deps import get_employee_service
from employee_management_api.app.schemas.employee import (
    MAX_EMPLOYEE_ID,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
)
from employee_management_api.app.services.employee_service import EmployeeService

DELETE_MESSAGE = "Employee Deleted Successfully"

router = APIRouter()


@router.post("/add", response_model=EmployeeRead)
def add_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    return service.add_employee(employee_in)


@router.get("/all", response_model=List[EmployeeRead])
def get_all_employees(service: EmployeeService = Depends(get_employee_service)) -> List[EmployeeRead]:
    return service.get_all_employees()


@router.get("/get/{employee_id}", response_model=EmployeeRead)
def get_employee_by_id(
    employee_id: int = Path(..., le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    return service.get_employee_by_id(employee_id)


@router.put("/update", response_model=EmployeeRead)
def update_employee(
    employee_in: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """The id travels in the body, as the web client sends it."""
    return service.update_employee(employee_in)


@router.delete("/delete/{employee_id}", response_class=PlainTextResponse)
def delete_employee_by_id(
    employee_id: int = Path(..., le=MAX_EMPLOYEE_ID),
    service: EmployeeService = Depends(get_employee_service),
) -> str:
    service.delete_employee_by_id(employee_id)
    return DELETE_MESSAGE
