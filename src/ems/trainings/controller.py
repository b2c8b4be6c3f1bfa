from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import day, employee_name
from ..container import Container

FIELDS = (
    Column("Employee", employee_name),
    Column("Training", lambda t: t.training_name),
    Column("Start date", lambda t: day(t.start_date)),
    Column("End date", lambda t: day(t.end_date)),
    Column("Status", lambda t: t.status),
)

PAGE = CrudPage(
    name="trainings",
    title="Training",
    singular="training record",
    plural="training records",
    columns=FIELDS,
    detail_fields=FIELDS,
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.training_service, url_prefix="/Trainings"))
