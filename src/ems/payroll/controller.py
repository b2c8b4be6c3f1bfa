from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import employee_name, money
from ..container import Container

FIELDS = (
    Column("Employee", employee_name),
    Column("Period", lambda p: p.period),
    Column("Salary", lambda p: money(p.salary)),
    Column("Bonus", lambda p: money(p.bonus)),
    Column("Deductions", lambda p: money(p.deductions)),
    Column("Net pay", lambda p: money(p.net_pay)),
)

PAGE = CrudPage(
    name="payrolls",
    title="Payroll",
    singular="payroll record",
    plural="payroll records",
    columns=FIELDS,
    detail_fields=FIELDS,
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.payroll_service, url_prefix="/Payrolls"))
