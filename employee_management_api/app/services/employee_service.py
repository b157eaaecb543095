"""
Service layer for employee records.

``EmployeeService`` is the contract consumed by the API layer: add,
list, get, update and delete employees.  ``StoreEmployeeService`` is
its implementation on top of an ``EmployeeStore`` handed in at
construction time; it keeps no state of its own between calls.

Input may be given as a schema instance or as a plain mapping.  Schema
validation failures are raised as ``ValidationError``; errors from the
store (``NotFoundError``, ``ValidationError``) propagate unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel

from employee_management_api.app.core.exceptions import ValidationError
from employee_management_api.app.core.security import hash_password
from employee_management_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from employee_management_api.app.stores.base import EmployeeStore

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class EmployeeService(ABC):
    """Operations available on employee records."""

    @abstractmethod
    def add_employee(self, employee: Union[EmployeeCreate, Mapping[str, Any]]) -> EmployeeRead:
        """Persist a new employee and return it with its assigned id."""

    @abstractmethod
    def get_all_employees(self) -> List[EmployeeRead]:
        """Return every employee; an empty list when there are none."""

    @abstractmethod
    def get_employee_by_id(self, employee_id: int) -> EmployeeRead:
        """Return the employee with ``employee_id`` or raise ``NotFoundError``."""

    @abstractmethod
    def update_employee(self, employee: Union[EmployeeUpdate, Mapping[str, Any]]) -> EmployeeRead:
        """Overwrite the employee identified by ``employee.id`` and return it."""

    @abstractmethod
    def delete_employee_by_id(self, employee_id: int) -> None:
        """Remove the employee with ``employee_id`` or raise ``NotFoundError``."""


class StoreEmployeeService(EmployeeService):
    """``EmployeeService`` that delegates persistence to an ``EmployeeStore``."""

    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    def add_employee(self, employee: Union[EmployeeCreate, Mapping[str, Any]]) -> EmployeeRead:
        data = _coerce(EmployeeCreate, employee)
        return self.store.create(
            data.profile(),
            hash_password(data.password),
            employee_id=data.id or None,
        )

    def get_all_employees(self) -> List[EmployeeRead]:
        return self.store.list()

    def get_employee_by_id(self, employee_id: int) -> EmployeeRead:
        return self.store.get(_check_id(employee_id))

    def update_employee(self, employee: Union[EmployeeUpdate, Mapping[str, Any]]) -> EmployeeRead:
        data = _coerce(EmployeeUpdate, employee)
        if data.id is None:
            raise ValidationError("Employee id is required for an update")
        password_hash = hash_password(data.password) if data.password else None
        return self.store.update(data.id, data.profile(), password_hash)

    def delete_employee_by_id(self, employee_id: int) -> None:
        self.store.delete(_check_id(employee_id))


def _coerce(schema: Type[SchemaT], value: Any) -> SchemaT:
    """Validate ``value`` into ``schema``, raising ``ValidationError`` on failure."""
    if isinstance(value, schema):
        return value
    if isinstance(value, BaseModel):
        # e.g. an EmployeeRead passed back in for an update
        value = value.model_dump()
    try:
        return schema.model_validate(value)
    except pydantic.ValidationError as exc:
        details = [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        fields = ", ".join(".".join(str(part) for part in d["loc"]) or "body" for d in details)
        raise ValidationError(f"Invalid employee data: {fields}", details=details)


def _check_id(employee_id: Any) -> int:
    if isinstance(employee_id, bool) or not isinstance(employee_id, int):
        raise ValidationError(f"Employee id must be an integer, got {employee_id!r}")
    return employee_id
