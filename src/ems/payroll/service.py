from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..common import datetime_utils
from ..common.crud import CrudRepository, EmployeeOwnedService
from ..common.validators import FormReader
from ..core.constants import MONEY_MAX_DIGITS, MONEY_PLACES, PAYROLL_MAX_YEAR, PAYROLL_MIN_YEAR
from .model import Payroll
from .repository import PayrollRepository

DUPLICATE_PERIOD_MESSAGE = "A payroll record already exists for this employee for the selected month and year."


def compute_net_pay(salary: Decimal, bonus: Decimal, deductions: Decimal) -> Decimal:
    return salary + bonus - deductions


class PayrollService(EmployeeOwnedService[Payroll]):
    """Use case: monthly payroll records, one per employee and period.

    Net pay is always derived from salary, bonus and deductions; a submitted
    net pay value is ignored.
    """

    model = Payroll
    entity_name = "Payroll record"

    def __init__(self, repo: PayrollRepository, employees: CrudRepository):
        super().__init__(repo, employees)
        self._payrolls = repo

    def _choice_label(self, employee: Any) -> str:
        return f"{employee.full_name} (Base: ${employee.salary:,.2f})"

    def new_form(self) -> dict[str, str]:
        today = datetime_utils.today()
        return {
            "employee_id": "",
            "month": str(today.month),
            "year": str(today.year),
            "salary": "0",
            "bonus": "0",
            "deductions": "0",
        }

    def to_form(self, entity: Payroll) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "employee_id": str(entity.employee_id),
            "month": str(entity.month),
            "year": str(entity.year),
            "salary": str(entity.salary),
            "bonus": str(entity.bonus),
            "deductions": str(entity.deductions),
        }

    def _read(self, reader: FormReader) -> dict[str, Any]:
        month = reader.integer("month", "Month")
        if month is not None and not 1 <= month <= 12:
            reader.error("month", "Month must be between 1 and 12.")

        year = reader.integer("year", "Year")
        if year is not None and not PAYROLL_MIN_YEAR <= year <= PAYROLL_MAX_YEAR:
            reader.error("year", f"Year must be between {PAYROLL_MIN_YEAR} and {PAYROLL_MAX_YEAR}.")

        amounts: dict[str, Optional[Decimal]] = {}
        for field, label in (("salary", "Salary"), ("bonus", "Bonus"), ("deductions", "Deductions")):
            amount = reader.decimal(field, label)
            if amount is not None and amount < 0:
                reader.error(field, f"{label} cannot be negative.")
            amounts[field] = amount

        if None not in amounts.values():
            net_pay = compute_net_pay(amounts["salary"], amounts["bonus"], amounts["deductions"])
            if abs(net_pay) >= 10 ** (MONEY_MAX_DIGITS - MONEY_PLACES):
                reader.error("", "Net pay is too large.")

        return {"employee_id": self._read_employee(reader), "month": month, "year": year, **amounts}

    def _check(self, values: dict[str, Any], reader: FormReader, *, current_id: Optional[int]) -> None:
        employee_id, month, year = values["employee_id"], values["month"], values["year"]
        if reader.has_error("employee_id") or reader.has_error("month") or reader.has_error("year"):
            return
        if self._payrolls.exists_for_period(employee_id=employee_id, month=month, year=year, exclude_id=current_id):
            reader.error("", DUPLICATE_PERIOD_MESSAGE)

    def _apply(self, entity: Payroll, values: dict[str, Any]) -> None:
        super()._apply(entity, values)
        entity.net_pay = compute_net_pay(entity.salary, entity.bonus, entity.deductions)
