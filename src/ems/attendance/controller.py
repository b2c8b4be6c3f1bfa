from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import clock, day, employee_name
from ..container import Container

FIELDS = (
    Column("Employee", employee_name),
    Column("Date", lambda a: day(a.date)),
    Column("Check-in", lambda a: clock(a.check_in_time)),
    Column("Check-out", lambda a: clock(a.check_out_time)),
    Column("Status", lambda a: a.status),
)

PAGE = CrudPage(
    name="attendances",
    title="Attendance",
    singular="attendance record",
    plural="attendance records",
    columns=FIELDS,
    detail_fields=FIELDS,
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.attendance_service, url_prefix="/Attendances"))
