from __future__ import annotations

from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Attendance


class SQLAlchemyAttendanceRepository(SQLAlchemyRepository[Attendance]):
    model = Attendance
    entity_name = "Attendance record"

    def _ordered(self):
        return self._with_employee(Attendance.date.desc())
