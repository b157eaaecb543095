"""Tests for the requests based API client."""

import pytest
import requests

from employee_api_client import EmployeeAPIClient
from employee_management_api.app.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def api(client):
    # TestClient speaks the same session.request(...) interface as requests.
    return EmployeeAPIClient("http://testserver", session=client)


def test_client_crud_flow(api, employee_data):
    created = api.add_employee(employee_data(name="Alice"))
    assert created["id"] == 1

    assert api.get_employee_by_id(1) == created
    assert api.get_all_employees() == [created]

    updated = api.update_employee(dict(created, name="Alice B."))
    assert updated["name"] == "Alice B."

    assert api.delete_employee_by_id(1) is None
    assert api.get_all_employees() == []


def test_client_maps_404_to_not_found(api):
    with pytest.raises(NotFoundError, match="Employee 7 not found"):
        api.get_employee_by_id(7)
    with pytest.raises(NotFoundError):
        api.delete_employee_by_id(7)


def test_client_maps_422_to_validation_error(api, employee_data):
    with pytest.raises(ValidationError):
        api.add_employee(employee_data(email="broken"))


def test_client_update_requires_id(api, employee_data):
    with pytest.raises(ValidationError):
        api.update_employee(employee_data(id=0))


def test_client_raises_for_other_http_errors(mocker):
    response = mocker.Mock(spec=requests.Response)
    response.status_code = 500
    response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    session = mocker.Mock(spec=requests.Session)
    session.request.return_value = response
    api = EmployeeAPIClient("http://example.test/", session=session)

    with pytest.raises(requests.HTTPError):
        api.get_all_employees()
    session.request.assert_called_once_with(
        method="GET",
        url="http://example.test/api/v1/employees/",
        json=None,
        timeout=15,
    )
