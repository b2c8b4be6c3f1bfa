from __future__ import annotations

from datetime import timedelta
from typing import Any

from ..common import datetime_utils
from ..common.crud import EmployeeOwnedService
from ..common.validators import FormReader
from ..core.constants import DEFAULT_LEAVE_STATUS, LEAVE_TYPE_MAX_LENGTH, STATUS_MAX_LENGTH
from .model import Leave

LEAVE_TYPES = ("Annual", "Sick", "Personal", "Maternity", "Paternity", "Unpaid")


class LeaveService(EmployeeOwnedService[Leave]):
    model = Leave
    entity_name = "Leave record"

    def new_form(self) -> dict[str, str]:
        today = datetime_utils.today()
        return {
            "employee_id": "",
            "leave_type": "",
            "start_date": today.isoformat(),
            "end_date": (today + timedelta(days=1)).isoformat(),
            "status": DEFAULT_LEAVE_STATUS,
        }

    def to_form(self, entity: Leave) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "leave_type": entity.leave_type,
            "start_date": entity.start_date.isoformat(),
            "end_date": entity.end_date.isoformat(),
            "status": entity.status,
        }

    def _read(self, reader: FormReader) -> dict[str, Any]:
        values = {
            "employee_id": self._read_employee(reader),
            "leave_type": reader.text(
                "leave_type", "Leave type", max_length=LEAVE_TYPE_MAX_LENGTH, message="Please select a leave type."
            ),
            "start_date": reader.date("start_date", "Start date"),
            "end_date": reader.date("end_date", "End date"),
            "status": reader.text("status", "Status", max_length=STATUS_MAX_LENGTH),
        }

        # Single-day leave (end == start) is allowed.
        start, end = values["start_date"], values["end_date"]
        if start is not None and end is not None and end < start:
            reader.error("end_date", "End date cannot be before start date.")
        return values
