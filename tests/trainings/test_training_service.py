from __future__ import annotations

import pytest

from ems.core.exceptions import ValidationError
from ems.trainings.service import TrainingService


@pytest.fixture
def service(memory_repo, employee_factory):
    return TrainingService(memory_repo(), memory_repo([employee_factory(1)]))


def training_form(**overrides):
    form = {
        "employee_id": "1",
        "training_name": "Workplace Safety",
        "start_date": "2025-07-01",
        "end_date": "2025-07-01",
        "status": "Scheduled",
    }
    form.update(overrides)
    return form


def test_end_equal_to_start_is_allowed(service):
    assert service.create(training_form()).training_name == "Workplace Safety"


def test_end_before_start_is_rejected(service):
    with pytest.raises(ValidationError) as exc:
        service.create(training_form(end_date="2025-06-30"))

    assert "end_date" in exc.value.errors


def test_name_length_limit(service):
    with pytest.raises(ValidationError) as exc:
        service.create(training_form(training_name="x" * 201))

    assert exc.value.errors["training_name"] == ["Training name cannot be longer than 200 characters"]
