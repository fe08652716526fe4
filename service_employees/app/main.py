"""
Employees service for the Employee Management services.
"""

from typing import List, Optional

from fastapi import Response

from shared.base_service import BaseService
from shared.clock import Clock, utc_now
from shared.config import ServiceConfig
from shared.errors import NotFoundError
from shared.observability import get_observability_manager
from shared.store import NotFound
from shared.tracing import trace_function

from .records.manager import EmployeeManager
from .records.models import EmployeeRequest, EmployeeResponse


class EmployeesService(BaseService):
    """Employees service implementation."""

    def __init__(self, config: Optional[ServiceConfig] = None, clock: Clock = utc_now):
        super().__init__("employees", 8020, config)

        self.employees = EmployeeManager.with_seed(clock=clock)
        self.observability = get_observability_manager("employees", self.metrics)
        self.metrics.set_gauge("employees_stored", self.employees.count())

        self._setup_employee_routes()

    def _not_found(self, employee_id: int) -> NotFoundError:
        self.observability.log_error("employee_not_found", f"Employee {employee_id} not found")
        return NotFoundError(
            f"Employee with ID {employee_id} not found",
            details={"employee_id": employee_id}
        )

    def _record(self, operation: str):
        self.metrics.increment_counter("employee_operations_total", operation=operation)
        self.metrics.set_gauge("employees_stored", self.employees.count())

    def _setup_employee_routes(self):
        """Set up employee-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "employees",
                "message": "Employee Management - Employees Service",
                "version": "1.0.0"
            }

        @self.app.get("/api/employees", response_model=List[EmployeeResponse])
        @trace_function("employees_list")
        async def list_employees():
            """Retrieve all employees."""
            self._record("list")
            return self.employees.list_employees()

        @self.app.get("/api/employees/{employee_id}", response_model=EmployeeResponse)
        @trace_function("employees_get")
        async def get_employee(employee_id: int):
            """Retrieve an employee by ID."""
            self._record("get")
            outcome = self.employees.get_employee(employee_id)
            if isinstance(outcome, NotFound):
                raise self._not_found(employee_id)
            return outcome

        @self.app.post("/api/employees", response_model=EmployeeResponse, status_code=201)
        @trace_function("employees_create")
        async def create_employee(request: EmployeeRequest, response: Response):
            """Create a new employee."""
            created = self.employees.create_employee(
                request.name,
                request.birthdate,
                request.identity_number
            )
            self._record("create")
            self.observability.log_business_event("employee_created", employee_id=created.id)

            response.headers["Location"] = f"/api/employees/{created.id}"
            return created

        @self.app.put("/api/employees/{employee_id}", response_model=EmployeeResponse)
        @trace_function("employees_update")
        async def update_employee(employee_id: int, request: EmployeeRequest):
            """Update an existing employee."""
            outcome = self.employees.update_employee(
                employee_id,
                request.name,
                request.birthdate,
                request.identity_number
            )
            if isinstance(outcome, NotFound):
                raise self._not_found(employee_id)

            self._record("update")
            self.observability.log_business_event("employee_updated", employee_id=employee_id)
            return outcome

        @self.app.delete("/api/employees/{employee_id}", status_code=204)
        @trace_function("employees_delete")
        async def delete_employee(employee_id: int):
            """Delete an employee."""
            if not self.employees.delete_employee(employee_id):
                raise self._not_found(employee_id)

            self._record("delete")
            self.observability.log_business_event("employee_deleted", employee_id=employee_id)
            return Response(status_code=204)

    async def _check_dependencies(self):
        """Check employees dependencies."""
        return {"employee_store": "ok"}


def create_app(config: Optional[ServiceConfig] = None, clock: Clock = utc_now):
    """Create FastAPI application."""
    service = EmployeesService(config, clock)
    return service.app


if __name__ == "__main__":
    service = EmployeesService()
    service.run()
