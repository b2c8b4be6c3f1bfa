from __future__ import annotations

from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Employee


class SQLAlchemyEmployeeRepository(SQLAlchemyRepository[Employee]):
    model = Employee
    entity_name = "Employee"

    def _ordered(self):
        return Employee.query.order_by(Employee.last_name, Employee.first_name, Employee.id)
