from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import day, employee_name
from ..container import Container

FIELDS = (
    Column("Employee", employee_name),
    Column("Policy", lambda c: c.policy),
    Column("Acknowledged on", lambda c: day(c.acknowledged_on)),
    Column("Status", lambda c: c.status),
)

PAGE = CrudPage(
    name="compliances",
    title="Compliance",
    singular="compliance record",
    plural="compliance records",
    columns=FIELDS,
    detail_fields=FIELDS,
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.compliance_service, url_prefix="/Compliances"))
