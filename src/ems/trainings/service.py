from __future__ import annotations

from datetime import timedelta
from typing import Any

from ..common import datetime_utils
from ..common.crud import EmployeeOwnedService
from ..common.validators import FormReader
from ..core.constants import DEFAULT_TRAINING_STATUS, STATUS_MAX_LENGTH, TITLE_MAX_LENGTH
from .model import Training


class TrainingService(EmployeeOwnedService[Training]):
    model = Training
    entity_name = "Training record"

    def new_form(self) -> dict[str, str]:
        today = datetime_utils.today()
        return {
            "employee_id": "",
            "training_name": "",
            "start_date": today.isoformat(),
            "end_date": (today + timedelta(days=1)).isoformat(),
            "status": DEFAULT_TRAINING_STATUS,
        }

    def to_form(self, entity: Training) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "training_name": entity.training_name,
            "start_date": entity.start_date.isoformat(),
            "end_date": entity.end_date.isoformat(),
            "status": entity.status,
        }

    def _read(self, reader: FormReader) -> dict[str, Any]:
        values = {
            "employee_id": self._read_employee(reader),
            "training_name": reader.text("training_name", "Training name", max_length=TITLE_MAX_LENGTH),
            "start_date": reader.date("start_date", "Start date"),
            "end_date": reader.date("end_date", "End date"),
            "status": reader.text("status", "Status", max_length=STATUS_MAX_LENGTH),
        }

        start, end = values["start_date"], values["end_date"]
        if start is not None and end is not None and end < start:
            reader.error("end_date", "End date cannot be before start date.")
        return values
