from __future__ import annotations

import pytest

from ems.compliance.service import ComplianceService
from ems.core.exceptions import ValidationError


@pytest.fixture
def service(memory_repo, employee_factory):
    return ComplianceService(memory_repo(), memory_repo([employee_factory(1)]))


def compliance_form(**overrides):
    form = {"employee_id": "1", "policy": "Code of Conduct", "acknowledged_on": "2025-06-15", "status": "Acknowledged"}
    form.update(overrides)
    return form


def test_acknowledged_today(service, fixed_today):
    assert service.create(compliance_form()).acknowledged_on == fixed_today


def test_acknowledgment_in_future_is_rejected(service, fixed_today):
    with pytest.raises(ValidationError) as exc:
        service.create(compliance_form(acknowledged_on="2025-06-16"))

    assert exc.value.errors["acknowledged_on"] == ["Acknowledgment date cannot be in the future."]


def test_policy_is_required(service, fixed_today):
    with pytest.raises(ValidationError) as exc:
        service.create(compliance_form(policy=""))

    assert exc.value.errors["policy"] == ["Policy is required"]
