from __future__ import annotations

from typing import Optional

from ..database.sqlalchemy_base import SQLAlchemyRepository, read_scope
from .model import Payroll
from .repository import PayrollRepository


class SQLAlchemyPayrollRepository(SQLAlchemyRepository[Payroll], PayrollRepository):
    model = Payroll
    entity_name = "Payroll record"

    def _ordered(self):
        return self._with_employee(Payroll.year.desc(), Payroll.month.desc())

    def exists_for_period(self, *, employee_id: int, month: int, year: int, exclude_id: Optional[int] = None) -> bool:
        with read_scope(self.entity_name):
            query = Payroll.query.filter_by(employee_id=employee_id, month=month, year=year)
            if exclude_id is not None:
                query = query.filter(Payroll.id != exclude_id)
            return query.first() is not None
