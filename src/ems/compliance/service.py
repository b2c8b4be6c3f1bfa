from __future__ import annotations

from typing import Any

from ..common import datetime_utils
from ..common.crud import EmployeeOwnedService
from ..common.validators import FormReader
from ..core.constants import DEFAULT_COMPLIANCE_STATUS, STATUS_MAX_LENGTH, TITLE_MAX_LENGTH
from .model import Compliance


class ComplianceService(EmployeeOwnedService[Compliance]):
    """Use case: track policy acknowledgements."""

    model = Compliance
    entity_name = "Compliance record"

    def new_form(self) -> dict[str, str]:
        return {
            "employee_id": "",
            "policy": "",
            "acknowledged_on": datetime_utils.today().isoformat(),
            "status": DEFAULT_COMPLIANCE_STATUS,
        }

    def to_form(self, entity: Compliance) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "policy": entity.policy,
            "acknowledged_on": entity.acknowledged_on.isoformat(),
            "status": entity.status,
        }

    def _read(self, reader: FormReader) -> dict[str, Any]:
        acknowledged_on = reader.date("acknowledged_on", "Acknowledgment date")
        if acknowledged_on is not None and acknowledged_on > datetime_utils.today():
            reader.error("acknowledged_on", "Acknowledgment date cannot be in the future.")

        return {
            "employee_id": self._read_employee(reader),
            "policy": reader.text("policy", "Policy", max_length=TITLE_MAX_LENGTH),
            "acknowledged_on": acknowledged_on,
            "status": reader.text("status", "Status", max_length=STATUS_MAX_LENGTH),
        }
