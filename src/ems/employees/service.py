from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..common import datetime_utils
from ..common.crud import CrudService
from ..common.validators import FormReader
from ..core.constants import NAME_MAX_LENGTH
from .model import Employee


class EmployeeService(CrudService[Employee]):
    """Use case: maintain the employee register."""

    model = Employee
    entity_name = "Employee"

    def new_form(self) -> dict[str, str]:
        return {
            "first_name": "",
            "last_name": "",
            "email": "",
            "phone": "",
            "department": "",
            "position": "",
            "hire_date": datetime_utils.today().isoformat(),
            "salary": "0",
        }

    def to_form(self, entity: Employee) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "first_name": entity.first_name,
            "last_name": entity.last_name,
            "email": entity.email,
            "phone": entity.phone or "",
            "department": entity.department or "",
            "position": entity.position or "",
            "hire_date": entity.hire_date.isoformat() if entity.hire_date else "",
            "salary": str(entity.salary),
        }

    def describe(self, entity: Employee) -> str:
        return f"Employee {entity.full_name}"

    def _read(self, reader: FormReader) -> dict[str, Any]:
        salary: Optional[Decimal] = reader.decimal("salary", "Salary")
        if salary is not None and salary < 0:
            reader.error("salary", "Salary must be a positive number")

        return {
            "first_name": reader.text("first_name", "First name", max_length=NAME_MAX_LENGTH),
            "last_name": reader.text("last_name", "Last name", max_length=NAME_MAX_LENGTH),
            "email": reader.email("email", "Email"),
            "phone": reader.phone("phone", "Phone"),
            "department": reader.text("department", "Department", required=False, max_length=NAME_MAX_LENGTH),
            "position": reader.text("position", "Position", required=False, max_length=NAME_MAX_LENGTH),
            "hire_date": reader.date("hire_date", "Hire date"),
            "salary": salary,
        }
