from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import day, employee_name
from ..container import Container
from .service import LEAVE_TYPES

FIELDS = (
    Column("Employee", employee_name),
    Column("Leave type", lambda lv: lv.leave_type),
    Column("Start date", lambda lv: day(lv.start_date)),
    Column("End date", lambda lv: day(lv.end_date)),
    Column("Days", lambda lv: (lv.end_date - lv.start_date).days + 1),
    Column("Status", lambda lv: lv.status),
)

PAGE = CrudPage(
    name="leaves",
    title="Leave",
    singular="leave record",
    plural="leave records",
    columns=FIELDS,
    detail_fields=FIELDS,
    options={"leave_type": LEAVE_TYPES},
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.leave_service, url_prefix="/Leaves"))
