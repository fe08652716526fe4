"""
Tests for Employees service.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from shared.clock import FrozenClock
from shared.config import get_config
from service_employees.app.main import EmployeesService

JANE = {"name": "Jane Roe", "birthdate": "1995-03-10", "identity_number": "001-100395-5005E"}


@pytest.fixture
def clock():
    return FrozenClock(datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def client(clock):
    """Create test client."""
    service = EmployeesService(get_config("employees", 8020), clock)
    return TestClient(service.app)


def test_root_endpoint(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "employees"


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "employees"
    assert data["status"] == "ok"


def test_list_employees(client):
    response = client.get("/api/employees")
    assert response.status_code == 200

    employees = response.json()
    assert len(employees) == 3
    assert employees[0] == {
        "id": 1,
        "name": "John Doe",
        "birthdate": "1990-05-15",
        "identity_number": "001-150590-1001A",
        "age": 35,
    }


def test_get_employee(client):
    response = client.get("/api/employees/2")
    assert response.status_code == 200
    assert response.json()["name"] == "Jane Smith"
    assert response.json()["age"] == 39


def test_get_missing_employee(client):
    response = client.get("/api/employees/999")
    assert response.status_code == 404
    data = response.json()
    assert data["code"] == "NOT_FOUND"
    assert data["message"] == "Employee with ID 999 not found"


def test_create_employee(client):
    response = client.post("/api/employees", json=JANE)
    assert response.status_code == 201
    assert response.headers["Location"] == "/api/employees/4"

    data = response.json()
    assert data["id"] == 4
    assert data["age"] == 30

    assert client.get("/api/employees/4").json()["name"] == "Jane Roe"


def test_create_employee_with_future_birthdate(client):
    response = client.post("/api/employees", json={**JANE, "birthdate": "2025-06-02"})
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["message"] == "Birthdate cannot be in the future"

    assert len(client.get("/api/employees").json()) == 3


@pytest.mark.parametrize("body", [
    {},
    {**JANE, "name": "J"},
    {**JANE, "name": "x" * 101},
    {**JANE, "identity_number": ""},
    {**JANE, "birthdate": "not-a-date"},
    {"name": "Jane Roe", "birthdate": "1995-03-10"},
])
def test_create_employee_rejects_bad_shape(client, body):
    response = client.post("/api/employees", json=body)
    assert response.status_code == 422


def test_update_employee(client):
    response = client.put("/api/employees/1", json={**JANE, "name": "John Q. Doe"})
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["name"] == "John Q. Doe"
    assert data["birthdate"] == "1995-03-10"


def test_update_missing_employee(client):
    response = client.put("/api/employees/999", json=JANE)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_update_with_future_birthdate(client):
    response = client.put("/api/employees/1", json={**JANE, "birthdate": "2099-01-01"})
    assert response.status_code == 400


def test_delete_employee(client):
    response = client.delete("/api/employees/3")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get("/api/employees/3").status_code == 404
    assert client.delete("/api/employees/3").status_code == 404


def test_ids_not_reused_after_delete(client):
    client.delete("/api/employees/3")
    response = client.post("/api/employees", json=JANE)
    assert response.json()["id"] == 4


def test_metrics_endpoint(client):
    client.post("/api/employees", json=JANE)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert 'employee_operations_total{operation="create"} 1.0' in response.text
    assert "employees_stored 4.0" in response.text


def test_http_metrics_use_route_template(client):
    client.get("/api/employees/1")
    client.get("/api/employees/2")
    client.get("/api/employees/999")
    client.get("/no/such/path")

    text = client.get("/metrics").text
    assert 'endpoint="/api/employees/{employee_id}"' in text
    assert 'endpoint="unmatched"' in text
    assert 'endpoint="/api/employees/1"' not in text
    assert 'endpoint="/no/such/path"' not in text
