from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import day, employee_name
from ..container import Container

PAGE = CrudPage(
    name="performances",
    title="Performance",
    singular="performance review",
    plural="performance reviews",
    columns=(
        Column("Employee", employee_name),
        Column("Review date", lambda p: day(p.review_date)),
        Column("Score", lambda p: p.score),
    ),
    detail_fields=(
        Column("Employee", employee_name),
        Column("Review date", lambda p: day(p.review_date)),
        Column("Score", lambda p: p.score),
        Column("Comments", lambda p: p.comments),
    ),
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.performance_service, url_prefix="/Performances"))
