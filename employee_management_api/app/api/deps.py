"""
FastAPI dependencies shared by the routers.

The employee store is created once by ``create_app`` and kept on
``app.state``; each request gets a service bound to that store.
"""

from fastapi import Request

from employee_management_api.app.services.employee_service import EmployeeService, StoreEmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    return StoreEmployeeService(request.app.state.employee_store)
