"""
Employee data models for the Employees Service.
"""

from dataclasses import dataclass
from datetime import date
from typing import List

from pydantic import BaseModel, Field


@dataclass
class Employee:
    """Stored employee record. ``age`` is derived, never stored."""
    id: int
    name: str
    birthdate: date
    identity_number: str


SEED_EMPLOYEES: List[Employee] = [
    Employee(id=1, name="John Doe", birthdate=date(1990, 5, 15), identity_number="001-150590-1001A"),
    Employee(id=2, name="Jane Smith", birthdate=date(1985, 8, 22), identity_number="001-220885-2002B"),
    Employee(id=3, name="Bob Johnson", birthdate=date(1992, 12, 10), identity_number="001-101292-3003C"),
]


def age_on(birthdate: date, today: date) -> int:
    """Whole years between ``birthdate`` and ``today``.

    A Feb 29 birthday is not reached until Mar 1 in non-leap years.
    """
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


class EmployeeRequest(BaseModel):
    """Request model for creating or updating an employee."""
    name: str = Field(..., min_length=2, max_length=100, description="Full name")
    birthdate: date = Field(..., description="Date of birth")
    identity_number: str = Field(..., min_length=1, max_length=50, description="Government identity number")


class EmployeeResponse(BaseModel):
    """Employee with derived age."""
    id: int
    name: str
    birthdate: date
    identity_number: str
    age: int

    @classmethod
    def from_record(cls, employee: Employee, today: date) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            name=employee.name,
            birthdate=employee.birthdate,
            identity_number=employee.identity_number,
            age=age_on(employee.birthdate, today)
        )
