from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import day, money
from ..container import Container

COLUMNS = (
    Column("Name", lambda e: e.full_name),
    Column("Email", lambda e: e.email),
    Column("Department", lambda e: e.department),
    Column("Position", lambda e: e.position),
    Column("Hire date", lambda e: day(e.hire_date)),
    Column("Salary", lambda e: money(e.salary)),
)

PAGE = CrudPage(
    name="employees",
    title="Employee",
    singular="employee",
    plural="employees",
    columns=COLUMNS,
    detail_fields=(
        Column("First name", lambda e: e.first_name),
        Column("Last name", lambda e: e.last_name),
        Column("Email", lambda e: e.email),
        Column("Phone", lambda e: e.phone),
        Column("Department", lambda e: e.department),
        Column("Position", lambda e: e.position),
        Column("Hire date", lambda e: day(e.hire_date)),
        Column("Salary", lambda e: money(e.salary)),
    ),
    deleted_message="{name} deleted successfully!",
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.employee_service, url_prefix="/Employees"))
