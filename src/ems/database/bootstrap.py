from __future__ import annotations

from datetime import date, time, timedelta
from decimal import Decimal

from sqlalchemy import inspect
from werkzeug.security import generate_password_hash

from ..extensions import db

# Must run inside an application context.


def init_schema() -> None:
    """Create missing tables. Existing tables are left untouched."""
    from .. import models  # noqa: F401

    db.create_all()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def _employee(first: str, last: str, department: str, position: str, salary: str, hired: date):
    from ..employees.model import Employee

    return Employee(
        first_name=first,
        last_name=last,
        email=f"{first}.{last}@example.com".lower(),
        phone="+1 555 0100",
        department=department,
        position=position,
        hire_date=hired,
        salary=Decimal(salary),
    )


def seed_demo_data() -> int:
    """Insert a small demo dataset when the employees table is empty.

    Returns the number of employees added (0 when data already exists).
    """
    from ..models import Attendance, Compliance, Employee, Leave, Payroll, Performance, Training, User

    if db.session.query(Employee.id).first() is not None:
        return 0

    today = date.today()
    alice = _employee("Alice", "Nguyen", "Engineering", "Developer", "5200.00", today - timedelta(days=400))
    bob = _employee("Bob", "Tran", "HR", "Recruiter", "4100.00", today - timedelta(days=200))
    carol = _employee("Carol", "Le", "Finance", "Accountant", "4800.00", today - timedelta(days=90))
    employees = [alice, bob, carol]

    for employee in employees:
        employee.attendances.append(
            Attendance(date=today, check_in_time=time(9, 0), check_out_time=time(17, 30), status="Present")
        )
        employee.payrolls.append(
            Payroll(
                month=today.month,
                year=today.year,
                salary=employee.salary,
                bonus=Decimal("0"),
                deductions=Decimal("150.00"),
                net_pay=employee.salary - Decimal("150.00"),
            )
        )
        employee.compliances.append(
            Compliance(policy="Code of Conduct", acknowledged_on=today - timedelta(days=30), status="Acknowledged")
        )

    bob.leaves.append(
        Leave(
            leave_type="Annual",
            start_date=today + timedelta(days=7),
            end_date=today + timedelta(days=9),
            status="Pending",
        )
    )
    alice.performances.append(
        Performance(review_date=today - timedelta(days=14), score=Decimal("4.5"), comments="Strong delivery.")
    )
    carol.trainings.append(
        Training(
            training_name="Workplace Safety",
            start_date=today + timedelta(days=3),
            end_date=today + timedelta(days=4),
            status="Scheduled",
        )
    )
    alice.user = User(username="admin", password_hash=generate_password_hash("admin123"), role="Admin")

    db.session.add_all(employees)
    db.session.commit()
    return len(employees)
