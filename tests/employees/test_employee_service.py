from __future__ import annotations

from decimal import Decimal

import pytest

from ems.core.exceptions import IdMismatchError, NotFoundError, ValidationError
from ems.employees.service import EmployeeService


@pytest.fixture
def employees(memory_repo):
    return memory_repo()


@pytest.fixture
def service(employees):
    return EmployeeService(employees)


def employee_form(**overrides):
    form = {
        "first_name": "Alice",
        "last_name": "Nguyen",
        "email": "alice@example.com",
        "phone": "+1 555 0100",
        "department": "Engineering",
        "position": "Developer",
        "hire_date": "2023-01-09",
        "salary": "5200.00",
    }
    form.update(overrides)
    return form


def test_create_trims_text_fields(service):
    employee = service.create(employee_form(first_name="  Alice "))

    assert employee.first_name == "Alice"
    assert employee.salary == Decimal("5200.00")


def test_optional_fields_may_be_blank(service):
    employee = service.create(employee_form(phone="", department="", position=""))

    assert employee.phone is None
    assert employee.display_name == "Alice Nguyen"


def test_collects_every_field_error(service, employees):
    with pytest.raises(ValidationError) as exc:
        service.create(employee_form(first_name="", email="not-an-email", salary="-1", hire_date="yesterday"))

    errors = exc.value.errors
    assert errors["first_name"] == ["First name is required"]
    assert errors["email"] == ["Invalid email address"]
    assert errors["salary"] == ["Salary must be a positive number"]
    assert "hire_date" in errors
    assert employees.count() == 0


def test_update_with_mismatched_id_changes_nothing(service):
    employee = service.create(employee_form())

    with pytest.raises(IdMismatchError):
        service.update(employee.id, employee_form(id=str(employee.id + 1), first_name="Changed"))

    assert employee.first_name == "Alice"


def test_update_of_missing_record(service):
    with pytest.raises(NotFoundError):
        service.update(99, employee_form(id="99"))


def test_delete_returns_description(service, employees):
    employee = service.create(employee_form())

    assert service.delete(employee.id) == "Employee Alice Nguyen"
    assert employees.count() == 0


def test_delete_of_missing_record(service):
    with pytest.raises(NotFoundError):
        service.delete(999999)


def test_get_without_id(service):
    with pytest.raises(NotFoundError):
        service.get(None)
