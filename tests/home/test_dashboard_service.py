from __future__ import annotations

from ems.attendance.service import AttendanceService
from ems.employees.service import EmployeeService
from ems.home.service import DashboardCounts, DashboardService
from ems.leaves.service import LeaveService


def test_counts(memory_repo, employee_factory):
    employees = memory_repo([employee_factory(1), employee_factory(2)])
    service = DashboardService(
        EmployeeService(employees),
        AttendanceService(memory_repo(), employees),
        LeaveService(memory_repo(), employees),
    )

    assert service.counts() == DashboardCounts(employees=2, attendances=0, leaves=0)
