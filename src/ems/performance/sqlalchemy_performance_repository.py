from __future__ import annotations

from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Performance


class SQLAlchemyPerformanceRepository(SQLAlchemyRepository[Performance]):
    model = Performance
    entity_name = "Performance review"

    def _ordered(self):
        return self._with_employee(Performance.review_date.desc())
