from __future__ import annotations

from ..database.sqlalchemy_base import SQLAlchemyRepository
from .model import Training


class SQLAlchemyTrainingRepository(SQLAlchemyRepository[Training]):
    model = Training
    entity_name = "Training record"

    def _ordered(self):
        return self._with_employee(Training.start_date.desc())
