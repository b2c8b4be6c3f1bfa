from __future__ import annotations

from dataclasses import dataclass

from ..common.crud import CrudService


@dataclass(frozen=True)
class DashboardCounts:
    employees: int = 0
    attendances: int = 0
    leaves: int = 0


class DashboardService:
    """Use case: headline numbers on the home page."""

    def __init__(self, employees: CrudService, attendances: CrudService, leaves: CrudService):
        self._employees = employees
        self._attendances = attendances
        self._leaves = leaves

    def counts(self) -> DashboardCounts:
        return DashboardCounts(
            employees=self._employees.count(),
            attendances=self._attendances.count(),
            leaves=self._leaves.count(),
        )
