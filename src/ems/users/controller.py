from __future__ import annotations

from flask import Flask

from ..common.crud_controller import Column, CrudPage, crud_blueprint
from ..common.formatting import employee_name
from ..container import Container
from .service import ROLES

# The password hash is never shown.
FIELDS = (
    Column("Employee", employee_name),
    Column("Username", lambda u: u.username),
    Column("Role", lambda u: u.role),
)

PAGE = CrudPage(
    name="users",
    title="User",
    singular="user account",
    plural="user accounts",
    columns=FIELDS,
    detail_fields=FIELDS,
    options={"role": ROLES},
)


def register(app: Flask, container: Container) -> None:
    app.register_blueprint(crud_blueprint(PAGE, container.user_service, url_prefix="/Users"))
