from __future__ import annotations

from typing import Optional

from ..database.sqlalchemy_base import SQLAlchemyRepository, read_scope
from ..employees.model import Employee
from .model import User
from .repository import UserRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    model = User
    entity_name = "User account"

    def _ordered(self):
        # Ordered by the owning employee's name only.
        return self._with_employee()

    def username_taken(self, username: str, *, exclude_id: Optional[int] = None) -> bool:
        with read_scope(self.entity_name):
            query = User.query.filter_by(username=username)
            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)
            return query.first() is not None

    def employee_has_account(self, employee_id: int, *, exclude_id: Optional[int] = None) -> bool:
        with read_scope(self.entity_name):
            query = User.query.filter_by(employee_id=employee_id)
            if exclude_id is not None:
                query = query.filter(User.id != exclude_id)
            return query.first() is not None

    def employee_ids_with_accounts(self) -> set[int]:
        with read_scope(self.entity_name) as session:
            return {row[0] for row in session.query(User.employee_id).join(Employee).all()}
