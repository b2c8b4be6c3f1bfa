from __future__ import annotations

from datetime import date, time

import pytest
from sqlalchemy import text

from ems.attendance.sqlalchemy_attendance_repository import SQLAlchemyAttendanceRepository
from ems.core.exceptions import NotFoundError
from ems.employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from ems.extensions import db
from ems.models import Attendance


def test_update_of_row_deleted_elsewhere_is_not_found(app, add_employee):
    employee_id = add_employee()

    with app.app_context():
        repo = SQLAlchemyEmployeeRepository()
        employee = repo.get_by_id(employee_id)
        db.session.execute(text("DELETE FROM employees WHERE id = :id"), {"id": employee_id})

        employee.first_name = "Changed"
        with pytest.raises(NotFoundError):
            repo.update(employee)


def test_employees_ordered_by_last_then_first_name(app, add_employee):
    add_employee(first="Zoe", last="Adams")
    add_employee(first="Amy", last="Brown")
    add_employee(first="Ann", last="Adams")

    with app.app_context():
        names = [e.full_name for e in SQLAlchemyEmployeeRepository().list_all()]

    assert names == ["Ann Adams", "Zoe Adams", "Amy Brown"]


def test_attendance_newest_first(app, add_employee):
    employee_id = add_employee()

    with app.app_context():
        repo = SQLAlchemyAttendanceRepository()
        for day in (date(2025, 6, 1), date(2025, 6, 3), date(2025, 6, 2)):
            repo.add(Attendance(employee_id=employee_id, date=day, check_in_time=time(9, 0), status="Present"))

        assert [a.date.day for a in repo.list_all()] == [3, 2, 1]
        assert repo.count() == 3
