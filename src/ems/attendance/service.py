from __future__ import annotations

from typing import Any

from ..common import datetime_utils
from ..common.crud import EmployeeOwnedService
from ..common.datetime_utils import format_clock_time
from ..common.validators import FormReader
from ..core.constants import DEFAULT_ATTENDANCE_STATUS, DEFAULT_CHECK_IN_TIME, STATUS_MAX_LENGTH
from .model import Attendance


class AttendanceService(EmployeeOwnedService[Attendance]):
    model = Attendance
    entity_name = "Attendance record"

    def new_form(self) -> dict[str, str]:
        return {
            "employee_id": "",
            "date": datetime_utils.today().isoformat(),
            "check_in_time": format_clock_time(DEFAULT_CHECK_IN_TIME),
            "check_out_time": "",
            "status": DEFAULT_ATTENDANCE_STATUS,
        }

    def to_form(self, entity: Attendance) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "date": entity.date.isoformat(),
            "check_in_time": format_clock_time(entity.check_in_time),
            "check_out_time": format_clock_time(entity.check_out_time),
            "status": entity.status,
        }

    def _read(self, reader: FormReader) -> dict[str, Any]:
        values = {
            "employee_id": self._read_employee(reader),
            "date": reader.date("date", "Date"),
            "check_in_time": reader.time("check_in_time", "Check-in time"),
            "check_out_time": reader.time("check_out_time", "Check-out time", required=False),
            "status": reader.text("status", "Status", max_length=STATUS_MAX_LENGTH),
        }

        check_in, check_out = values["check_in_time"], values["check_out_time"]
        if check_in is not None and check_out is not None and check_out <= check_in:
            reader.error("check_out_time", "Check-out time must be after check-in time.")
        return values
