"""Shared fixtures for the employee service tests."""

import pytest
from fastapi.testclient import TestClient

from employee_management_api.app.main import create_app
from employee_management_api.app.services.employee_service import StoreEmployeeService
from employee_management_api.app.stores import InMemoryEmployeeStore, SQLiteEmployeeStore


def make_employee(**overrides):
    """Return a valid employee payload, with ``overrides`` applied."""
    data = {
        "id": 0,
        "name": "Alice",
        "gender": "female",
        "department": "Engineering",
        "designation": "Developer",
        "email": "Alice@Example.com",
        "contact": "+1 555-123-4567",
        "salary": 55000,
        "password": "s3cret!",
    }
    data.update(overrides)
    return data


@pytest.fixture
def employee_data():
    return make_employee


@pytest.fixture
def memory_store():
    return InMemoryEmployeeStore()


@pytest.fixture
def sqlite_store(tmp_path):
    store = SQLiteEmployeeStore(str(tmp_path / "employees.db"))
    store.initialize()
    return store


@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    """Each test using this fixture runs once per backend."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def service(store):
    return StoreEmployeeService(store)


@pytest.fixture
def client(memory_store):
    app = create_app(store=memory_store)
    with TestClient(app) as test_client:
        yield test_client
