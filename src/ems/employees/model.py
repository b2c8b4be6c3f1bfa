from __future__ import annotations

from decimal import Decimal

from ..extensions import db


class Employee(db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30))
    department = db.Column(db.String(100))
    position = db.Column(db.String(100))
    hire_date = db.Column(db.Date, nullable=False)
    salary = db.Column(db.Numeric(18, 2), nullable=False, default=Decimal("0"))

    # Dependent rows go with the employee.
    attendances = db.relationship("Attendance", back_populates="employee", cascade="all, delete-orphan")
    leaves = db.relationship("Leave", back_populates="employee", cascade="all, delete-orphan")
    performances = db.relationship("Performance", back_populates="employee", cascade="all, delete-orphan")
    payrolls = db.relationship("Payroll", back_populates="employee", cascade="all, delete-orphan")
    trainings = db.relationship("Training", back_populates="employee", cascade="all, delete-orphan")
    compliances = db.relationship("Compliance", back_populates="employee", cascade="all, delete-orphan")
    user = db.relationship("User", back_populates="employee", uselist=False, cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def display_name(self) -> str:
        """Dropdown label: "First Last (Department)"."""
        if self.department:
            return f"{self.full_name} ({self.department})"
        return self.full_name

    def __repr__(self) -> str:
        return f"<Employee {self.id} {self.full_name}>"
