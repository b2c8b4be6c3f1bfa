from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlalchemy_attendance_repository import SQLAlchemyAttendanceRepository
from .compliance.service import ComplianceService
from .compliance.sqlalchemy_compliance_repository import SQLAlchemyComplianceRepository
from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from .home.service import DashboardService
from .leaves.service import LeaveService
from .leaves.sqlalchemy_leave_repository import SQLAlchemyLeaveRepository
from .payroll.service import PayrollService
from .payroll.sqlalchemy_payroll_repository import SQLAlchemyPayrollRepository
from .performance.service import PerformanceService
from .performance.sqlalchemy_performance_repository import SQLAlchemyPerformanceRepository
from .trainings.service import TrainingService
from .trainings.sqlalchemy_training_repository import SQLAlchemyTrainingRepository
from .users.service import UserService
from .users.sqlalchemy_user_repository import SQLAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    employees_repo: SQLAlchemyEmployeeRepository
    attendance_repo: SQLAlchemyAttendanceRepository
    leaves_repo: SQLAlchemyLeaveRepository
    payroll_repo: SQLAlchemyPayrollRepository
    performance_repo: SQLAlchemyPerformanceRepository
    trainings_repo: SQLAlchemyTrainingRepository
    compliance_repo: SQLAlchemyComplianceRepository
    users_repo: SQLAlchemyUserRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService
    performance_service: PerformanceService
    training_service: TrainingService
    compliance_service: ComplianceService
    user_service: UserService
    dashboard_service: DashboardService


def build_container() -> Container:
    # Repositories share the Flask-SQLAlchemy scoped session; no per-repo state.
    employees_repo = SQLAlchemyEmployeeRepository()
    attendance_repo = SQLAlchemyAttendanceRepository()
    leaves_repo = SQLAlchemyLeaveRepository()
    payroll_repo = SQLAlchemyPayrollRepository()
    performance_repo = SQLAlchemyPerformanceRepository()
    trainings_repo = SQLAlchemyTrainingRepository()
    compliance_repo = SQLAlchemyComplianceRepository()
    users_repo = SQLAlchemyUserRepository()

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    leave_service = LeaveService(leaves_repo, employees_repo)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        payroll_repo=payroll_repo,
        performance_repo=performance_repo,
        trainings_repo=trainings_repo,
        compliance_repo=compliance_repo,
        users_repo=users_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=PayrollService(payroll_repo, employees_repo),
        performance_service=PerformanceService(performance_repo, employees_repo),
        training_service=TrainingService(trainings_repo, employees_repo),
        compliance_service=ComplianceService(compliance_repo, employees_repo),
        user_service=UserService(users_repo, employees_repo),
        dashboard_service=DashboardService(employee_service, attendance_service, leave_service),
    )
