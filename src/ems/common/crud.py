from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Protocol, Sequence, TypeVar

from ..core.exceptions import IdMismatchError, NotFoundError
from .validators import FormReader

ModelT = TypeVar("ModelT")


class CrudRepository(Protocol):
    """Gateway operations every entity repository provides.

    Note (DIP): services depend on this interface, not on SQLAlchemy directly.
    """

    def list_all(self) -> Sequence[Any]:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[Any]:
        raise NotImplementedError

    def exists(self, entity_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def add(self, entity: Any) -> Any:
        raise NotImplementedError

    def update(self, entity: Any) -> Any:
        raise NotImplementedError

    def delete(self, entity: Any) -> None:
        raise NotImplementedError


def parse_id(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class CrudService(Generic[ModelT]):
    """Use cases shared by every screen: list, get, create, update, delete.

    Subclasses describe their fields in ``_read`` (parse + field rules) and
    ``_check`` (rules that need the store, e.g. duplicates). Both record
    problems on the FormReader; nothing is persisted while it holds errors.
    """

    model: Any = None
    entity_name = "Record"

    def __init__(self, repo: CrudRepository):
        self._repo = repo

    def list_all(self) -> list[ModelT]:
        return list(self._repo.list_all())

    def count(self) -> int:
        return self._repo.count()

    def get(self, entity_id: Optional[int]) -> ModelT:
        if entity_id is None:
            raise NotFoundError(self.entity_name)
        entity = self._repo.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    def employee_choices(self, current_id: Optional[int] = None) -> list[tuple[int, str]]:
        return []

    def new_form(self) -> dict[str, str]:
        raise NotImplementedError

    def to_form(self, entity: ModelT) -> dict[str, str]:
        raise NotImplementedError

    def describe(self, entity: ModelT) -> str:
        return f"{self.entity_name} {getattr(entity, 'id', '')}".strip()

    def validate(self, form: Mapping[str, str], *, current_id: Optional[int] = None) -> dict[str, Any]:
        reader = FormReader(form)
        values = self._read(reader)
        self._check(values, reader, current_id=current_id)
        reader.raise_if_invalid()
        return values

    def create(self, form: Mapping[str, str]) -> ModelT:
        values = self.validate(form)
        entity = self._build(values)
        return self._repo.add(entity)

    def update(self, entity_id: int, form: Mapping[str, str]) -> ModelT:
        payload_id = parse_id(form.get("id"))
        if payload_id != entity_id:
            raise IdMismatchError(entity_id, payload_id)

        values = self.validate(form, current_id=entity_id)
        entity = self.get(entity_id)
        self._apply(entity, values)
        return self._repo.update(entity)

    def delete(self, entity_id: Optional[int]) -> str:
        """Remove the record and return its description for the flash message."""
        entity = self.get(entity_id)
        label = self.describe(entity)
        self._repo.delete(entity)
        return label

    def _read(self, reader: FormReader) -> dict[str, Any]:
        raise NotImplementedError

    def _check(self, values: dict[str, Any], reader: FormReader, *, current_id: Optional[int]) -> None:
        return None

    def _build(self, values: dict[str, Any]) -> ModelT:
        entity = self.model()
        self._apply(entity, values)
        return entity

    def _apply(self, entity: ModelT, values: dict[str, Any]) -> None:
        for name, value in values.items():
            setattr(entity, name, value)


class EmployeeOwnedService(CrudService[ModelT]):
    """CrudService for records that belong to one employee (``employee_id``)."""

    def __init__(self, repo: CrudRepository, employees: CrudRepository):
        super().__init__(repo)
        self._employees = employees

    def employee_choices(self, current_id: Optional[int] = None) -> list[tuple[int, str]]:
        return [(e.id, self._choice_label(e)) for e in self._employees.list_all()]

    def _choice_label(self, employee: Any) -> str:
        return employee.display_name

    def _read_employee(self, reader: FormReader) -> Optional[int]:
        employee_id = reader.integer("employee_id", "Employee", message="Please select an employee.")
        if employee_id is not None and not self._employees.exists(employee_id):
            reader.error("employee_id", "Selected employee does not exist.")
        return employee_id

    def describe(self, entity: ModelT) -> str:
        employee = getattr(entity, "employee", None)
        if employee is not None:
            return f"{self.entity_name} of {employee.full_name}"
        return super().describe(entity)
