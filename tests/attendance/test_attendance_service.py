from __future__ import annotations

from datetime import time

import pytest

from ems.attendance.service import AttendanceService
from ems.core.exceptions import ValidationError


@pytest.fixture
def service(memory_repo, employee_factory):
    return AttendanceService(memory_repo(), memory_repo([employee_factory(1)]))


def attendance_form(**overrides):
    form = {"employee_id": "1", "date": "2025-06-02", "check_in_time": "09:00", "check_out_time": "", "status": "Present"}
    form.update(overrides)
    return form


def test_check_out_may_be_empty(service):
    record = service.create(attendance_form())

    assert record.check_out_time is None
    assert record.check_in_time == time(9, 0)


def test_check_out_equal_to_check_in_is_rejected(service):
    with pytest.raises(ValidationError) as exc:
        service.create(attendance_form(check_out_time="09:00"))

    assert exc.value.errors["check_out_time"] == ["Check-out time must be after check-in time."]


def test_check_out_one_second_later_is_accepted(service):
    record = service.create(attendance_form(check_out_time="09:00:01"))

    assert record.check_out_time == time(9, 0, 1)


def test_employee_must_be_selected(service):
    with pytest.raises(ValidationError) as exc:
        service.create(attendance_form(employee_id=""))

    assert exc.value.errors["employee_id"] == ["Please select an employee."]


def test_employee_must_exist(service):
    with pytest.raises(ValidationError) as exc:
        service.create(attendance_form(employee_id="42"))

    assert exc.value.errors["employee_id"] == ["Selected employee does not exist."]


def test_new_form_defaults(service, fixed_today):
    form = service.new_form()

    assert form["date"] == fixed_today.isoformat()
    assert form["check_in_time"] == "09:00"
    assert form["status"] == "Present"
