"""Imports every model so SQLAlchemy can resolve the string relationships."""

from .attendance.model import Attendance
from .compliance.model import Compliance
from .employees.model import Employee
from .leaves.model import Leave
from .payroll.model import Payroll
from .performance.model import Performance
from .trainings.model import Training
from .users.model import User

__all__ = [
    "Attendance",
    "Compliance",
    "Employee",
    "Leave",
    "Payroll",
    "Performance",
    "Training",
    "User",
]
