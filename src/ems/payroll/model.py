from decimal import Decimal

from ..extensions import db


class Payroll(db.Model):
    __tablename__ = "payrolls"
    __table_args__ = (db.UniqueConstraint("employee_id", "month", "year", name="uq_payroll_employee_period"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False, index=True)
    month = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)
    salary = db.Column(db.Numeric(18, 2), nullable=False, default=Decimal("0"))
    bonus = db.Column(db.Numeric(18, 2), nullable=False, default=Decimal("0"))
    deductions = db.Column(db.Numeric(18, 2), nullable=False, default=Decimal("0"))
    net_pay = db.Column(db.Numeric(18, 2), nullable=False, default=Decimal("0"))

    employee = db.relationship("Employee", back_populates="payrolls")

    @property
    def period(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
