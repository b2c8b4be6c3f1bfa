from __future__ import annotations

from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Leave


class SQLAlchemyLeaveRepository(SQLAlchemyRepository[Leave]):
    model = Leave
    entity_name = "Leave record"

    def _ordered(self):
        return self._with_employee(Leave.start_date.desc())
