from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager
from sqlalchemy.orm.exc import StaleDataError

from ..common.log import get_logger
from ..core.exceptions import NotFoundError, PersistenceError
from ..extensions import db

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")


@contextmanager
def read_scope(entity: str) -> Iterator[Any]:
    try:
        yield db.session
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.error("db_read_failed", entity=entity, error=str(exc))
        raise PersistenceError(f"{entity} could not be loaded", cause=exc) from exc


@contextmanager
def write_scope(entity: str, entity_id: Optional[int] = None) -> Iterator[Any]:
    """Commit on success, roll back on failure.

    A row that vanished between load and save (stale update) is reported as
    not found; any other database failure becomes a PersistenceError.
    """
    session = db.session
    try:
        yield session
        session.commit()
    except StaleDataError as exc:
        session.rollback()
        logger.warning("db_stale_row", entity=entity, entity_id=entity_id)
        raise NotFoundError(entity, entity_id) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("db_write_failed", entity=entity, entity_id=entity_id, error=str(exc))
        raise PersistenceError(f"{entity} could not be saved", cause=exc) from exc


class SQLAlchemyRepository(Generic[ModelT]):
    """Shared gateway operations for one model.

    Subclasses set ``model`` and ``entity_name`` and override ``_ordered`` with
    the list ordering of their screen.
    """

    model: Any = None
    entity_name = "Record"

    def _ordered(self):
        return self.model.query.order_by(self.model.id)

    def _with_employee(self, *order_by):
        # Imported here: employees.model is itself a gateway model.
        from ..employees.model import Employee

        return (
            self.model.query.join(self.model.employee)
            .options(contains_eager(self.model.employee))
            .order_by(*order_by, Employee.last_name, Employee.first_name, self.model.id)
        )

    def list_all(self) -> list[ModelT]:
        with read_scope(self.entity_name):
            return list(self._ordered().all())

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        with read_scope(self.entity_name) as session:
            return session.get(self.model, entity_id)

    def exists(self, entity_id: int) -> bool:
        with read_scope(self.entity_name) as session:
            return session.query(self.model.id).filter_by(id=entity_id).first() is not None

    def count(self) -> int:
        with read_scope(self.entity_name):
            return self.model.query.count()

    def add(self, entity: ModelT) -> ModelT:
        with write_scope(self.entity_name) as session:
            session.add(entity)
        return entity

    def update(self, entity: ModelT) -> ModelT:
        with write_scope(self.entity_name, getattr(entity, "id", None)) as session:
            session.add(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        with write_scope(self.entity_name, getattr(entity, "id", None)) as session:
            session.delete(entity)
