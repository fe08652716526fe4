"""
Employee record operations on top of the shared in-memory store.
"""

from datetime import date
from typing import Iterable, List, Union

from shared.clock import Clock, today, utc_now
from shared.errors import ValidationError
from shared.logging import get_logger
from shared.store import NotFound, RecordStore

from .models import SEED_EMPLOYEES, Employee, EmployeeResponse


class EmployeeManager:
    """CRUD for employees with the birthdate rule applied.

    Missing ids come back as ``NotFound`` values; only invalid input raises.
    """

    def __init__(self, store: RecordStore[Employee], clock: Clock = utc_now):
        self.store = store
        self.clock = clock
        self.logger = get_logger("employees.manager")

    @classmethod
    def with_seed(cls, seed: Iterable[Employee] = SEED_EMPLOYEES, clock: Clock = utc_now) -> "EmployeeManager":
        return cls(RecordStore("employees", seed), clock)

    def list_employees(self) -> List[EmployeeResponse]:
        current = today(self.clock)
        return [EmployeeResponse.from_record(employee, current) for employee in self.store.list_all()]

    def get_employee(self, employee_id: int) -> Union[EmployeeResponse, NotFound]:
        employee = self.store.get_by_id(employee_id)
        if employee is None:
            return NotFound(employee_id)
        return EmployeeResponse.from_record(employee, today(self.clock))

    def create_employee(self, name: str, birthdate: date, identity_number: str) -> EmployeeResponse:
        current = self._check_birthdate(birthdate)
        # id 0 is a placeholder; the store assigns the real one.
        created = self.store.create(Employee(id=0, name=name, birthdate=birthdate, identity_number=identity_number))
        self.logger.info("Employee created", employee_id=created.id)
        return EmployeeResponse.from_record(created, current)

    def update_employee(self, employee_id: int, name: str, birthdate: date,
                        identity_number: str) -> Union[EmployeeResponse, NotFound]:
        current = self._check_birthdate(birthdate)
        candidate = Employee(id=employee_id, name=name, birthdate=birthdate, identity_number=identity_number)

        outcome = self.store.update(employee_id, candidate)
        if isinstance(outcome, NotFound):
            self.logger.warning("Employee not found for update", employee_id=employee_id)
            return outcome

        self.logger.info("Employee updated", employee_id=employee_id)
        return EmployeeResponse.from_record(outcome, current)

    def delete_employee(self, employee_id: int) -> bool:
        deleted = self.store.delete(employee_id)
        if deleted:
            self.logger.info("Employee deleted", employee_id=employee_id)
        else:
            self.logger.warning("Employee not found for deletion", employee_id=employee_id)
        return deleted

    def count(self) -> int:
        return self.store.count()

    def _check_birthdate(self, birthdate: date) -> date:
        current = today(self.clock)
        if birthdate > current:
            raise ValidationError(
                "Birthdate cannot be in the future",
                details={"birthdate": birthdate.isoformat()}
            )
        return current
