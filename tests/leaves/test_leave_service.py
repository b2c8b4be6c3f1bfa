from __future__ import annotations

import pytest

from ems.core.exceptions import ValidationError
from ems.leaves.service import LeaveService


@pytest.fixture
def service(memory_repo, employee_factory):
    return LeaveService(memory_repo(), memory_repo([employee_factory(1)]))


def leave_form(**overrides):
    form = {"employee_id": "1", "leave_type": "Annual", "start_date": "2025-07-01", "end_date": "2025-07-03", "status": "Pending"}
    form.update(overrides)
    return form


def test_single_day_leave_is_allowed(service):
    record = service.create(leave_form(end_date="2025-07-01"))

    assert record.start_date == record.end_date


def test_end_before_start_is_rejected(service):
    with pytest.raises(ValidationError) as exc:
        service.create(leave_form(end_date="2025-06-30"))

    assert exc.value.errors["end_date"] == ["End date cannot be before start date."]


def test_leave_type_is_required(service):
    with pytest.raises(ValidationError) as exc:
        service.create(leave_form(leave_type=""))

    assert exc.value.errors["leave_type"] == ["Please select a leave type."]


def test_new_form_defaults(service, fixed_today):
    form = service.new_form()

    assert form["start_date"] == "2025-06-15"
    assert form["end_date"] == "2025-06-16"
    assert form["status"] == "Pending"
