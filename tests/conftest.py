from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

import ems.models  # noqa: F401
from ems.extensions import db
from ems.main import create_app
from ems.models import Employee


class InMemoryRepo:
    """Dict-backed stand-in for a SQLAlchemy repository."""

    def __init__(self, items=()):
        self.items: dict[int, object] = {}
        self._next_id = 1
        for item in items:
            self.add(item)

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, entity_id: int) -> Optional[object]:
        return self.items.get(entity_id)

    def exists(self, entity_id: int) -> bool:
        return entity_id in self.items

    def count(self) -> int:
        return len(self.items)

    def add(self, entity):
        if getattr(entity, "id", None) is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id) + 1
        self.items[entity.id] = entity
        return entity

    def update(self, entity):
        self.items[entity.id] = entity
        return entity

    def delete(self, entity) -> None:
        self.items.pop(entity.id, None)


def make_employee(
    entity_id: Optional[int] = None,
    first: str = "Alice",
    last: str = "Nguyen",
    department: Optional[str] = "Engineering",
    salary: str = "5200.00",
) -> Employee:
    return Employee(
        id=entity_id,
        first_name=first,
        last_name=last,
        email=f"{first}.{last}@example.com".lower(),
        department=department,
        position="Developer",
        hire_date=date(2023, 1, 9),
        salary=Decimal(salary),
    )


@pytest.fixture
def memory_repo():
    return InMemoryRepo


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def fixed_today(monkeypatch):
    day = date(2025, 6, 15)
    monkeypatch.setattr("ems.common.datetime_utils.today", lambda: day)
    return day


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'ems.db'}",
            "AUTO_INIT_DB": True,
            "AUTO_SEED_DB": False,
        }
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_employee(app):
    """Insert an employee directly and return its id."""

    def _add(**kwargs) -> int:
        with app.app_context():
            employee = make_employee(**kwargs)
            db.session.add(employee)
            db.session.commit()
            return employee.id

    return _add
