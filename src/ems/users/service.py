from __future__ import annotations

from typing import Any, Optional

from werkzeug.security import generate_password_hash

from ..common.crud import CrudRepository, EmployeeOwnedService
from ..common.validators import FormReader
from ..core.constants import DEFAULT_ROLE, MIN_PASSWORD_LENGTH, ROLE_MAX_LENGTH, USERNAME_MAX_LENGTH
from .model import User
from .repository import UserRepository

ROLES = ("Admin", "Manager", "User")


def hash_password(password: str) -> str:
    return generate_password_hash(password)


class UserService(EmployeeOwnedService[User]):
    """Use case: manage employee login accounts.

    Create requires ``password``; edit accepts an optional ``new_password``
    and keeps the stored hash when it is left blank.
    """

    model = User
    entity_name = "User account"

    def __init__(self, repo: UserRepository, employees: CrudRepository):
        super().__init__(repo, employees)
        self._users = repo

    def employee_choices(self, current_id: Optional[int] = None) -> list[tuple[int, str]]:
        taken = self._users.employee_ids_with_accounts()
        if current_id is not None:
            current = self._users.get_by_id(current_id)
            if current is not None:
                taken.discard(current.employee_id)
        return [(e.id, e.display_name) for e in self._employees.list_all() if e.id not in taken]

    def new_form(self) -> dict[str, str]:
        return {"employee_id": "", "username": "", "role": DEFAULT_ROLE}

    def to_form(self, entity: User) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "username": entity.username,
            "role": entity.role,
        }

    def describe(self, entity: User) -> str:
        return f"User account {entity.username}"

    def validate(self, form, *, current_id: Optional[int] = None) -> dict[str, Any]:
        reader = FormReader(form)
        values = self._read(reader)
        password_field = "password" if current_id is None else "new_password"
        values["password"] = self._read_password(reader, password_field, required=current_id is None)
        self._check(values, reader, current_id=current_id)
        reader.raise_if_invalid()
        return values

    def _read(self, reader: FormReader) -> dict[str, Any]:
        return {
            "employee_id": self._read_employee(reader),
            "username": reader.text("username", "Username", max_length=USERNAME_MAX_LENGTH),
            "role": reader.text("role", "Role", max_length=ROLE_MAX_LENGTH),
        }

    def _read_password(self, reader: FormReader, field: str, *, required: bool) -> Optional[str]:
        password = reader.value(field)
        if not password:
            if required:
                reader.error(field, "Password is required.")
            return None
        if len(password) < MIN_PASSWORD_LENGTH:
            reader.error(field, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
            return None
        return password

    def _check(self, values: dict[str, Any], reader: FormReader, *, current_id: Optional[int]) -> None:
        username = values["username"]
        if username and self._users.username_taken(username, exclude_id=current_id):
            reader.error("username", "Username already exists. Please choose a different username.")

        employee_id = values["employee_id"]
        if not reader.has_error("employee_id") and self._users.employee_has_account(employee_id, exclude_id=current_id):
            reader.error("employee_id", "This employee already has a user account.")

    def _apply(self, entity: User, values: dict[str, Any]) -> None:
        entity.employee_id = values["employee_id"]
        entity.username = values["username"]
        entity.role = values["role"]
        if values.get("password"):
            entity.password_hash = hash_password(values["password"])
