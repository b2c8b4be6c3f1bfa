from __future__ import annotations

from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Compliance


class SQLAlchemyComplianceRepository(SQLAlchemyRepository[Compliance]):
    model = Compliance
    entity_name = "Compliance record"

    def _ordered(self):
        return self._with_employee(Compliance.acknowledged_on.desc())
