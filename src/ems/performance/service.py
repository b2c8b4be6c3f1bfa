from __future__ import annotations

from typing import Any

from ..common import datetime_utils
from ..common.crud import EmployeeOwnedService
from ..common.validators import FormReader
from ..core.constants import DEFAULT_PERFORMANCE_SCORE, MAX_SCORE, MIN_SCORE, SCORE_MAX_DIGITS, SCORE_PLACES
from .model import Performance


class PerformanceService(EmployeeOwnedService[Performance]):
    model = Performance
    entity_name = "Performance review"

    def new_form(self) -> dict[str, str]:
        return {
            "employee_id": "",
            "review_date": datetime_utils.today().isoformat(),
            "score": str(DEFAULT_PERFORMANCE_SCORE),
            "comments": "",
        }

    def to_form(self, entity: Performance) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "review_date": entity.review_date.isoformat(),
            "score": str(entity.score),
            "comments": entity.comments,
        }

    def _read(self, reader: FormReader) -> dict[str, Any]:
        score = reader.decimal("score", "Score", max_digits=SCORE_MAX_DIGITS, places=SCORE_PLACES)
        if score is not None and not (MIN_SCORE <= score <= MAX_SCORE):
            reader.error("score", f"Score must be between {MIN_SCORE} and {MAX_SCORE}.")

        review_date = reader.date("review_date", "Review date")
        if review_date is not None and review_date > datetime_utils.today():
            reader.error("review_date", "Review date cannot be in the future.")

        return {
            "employee_id": self._read_employee(reader),
            "review_date": review_date,
            "score": score,
            "comments": reader.text("comments", "Comments"),
        }
