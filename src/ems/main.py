from __future__ import annotations

import importlib
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .common.log import configure_logging, get_logger
from .database.bootstrap import init_schema, list_tables, seed_demo_data
from .extensions import db

from .container import build_container
from .attendance.controller import register as register_attendance
from .compliance.controller import register as register_compliance
from .employees.controller import register as register_employees
from .home.controller import register as register_home
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .performance.controller import register as register_performance
from .settings import get_settings_module
from .trainings.controller import register as register_trainings
from .users.controller import register as register_users

logger = get_logger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["SQLALCHEMY_DATABASE_URI"] = getattr(settings, "DATABASE_URL")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["LOG_LEVEL"] = getattr(settings, "LOG_LEVEL", "INFO")
    app.config["JSON_LOGS"] = bool(getattr(settings, "JSON_LOGS", False))
    app.config["AUTO_INIT_DB"] = bool(getattr(settings, "AUTO_INIT_DB", False))
    app.config["AUTO_SEED_DB"] = bool(getattr(settings, "AUTO_SEED_DB", False))
    if overrides:
        app.config.update(overrides)

    configure_logging("ems", log_level=app.config["LOG_LEVEL"], json_logs=app.config["JSON_LOGS"])
    logger.info("app_starting", settings=settings_module, database=app.config["SQLALCHEMY_DATABASE_URI"])

    db.init_app(app)
    # Mapper registration for every entity before the first query.
    from . import models  # noqa: F401

    with app.app_context():
        if app.config["AUTO_INIT_DB"]:
            init_schema()
            logger.info("schema_ready", tables=len(list_tables()))
        if app.config["AUTO_SEED_DB"]:
            seeded = seed_demo_data()
            logger.info("demo_seed_ready", employees_added=seeded)

    container = build_container()

    register_home(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_payroll(app, container)
    register_performance(app, container)
    register_trainings(app, container)
    register_compliance(app, container)
    register_users(app, container)

    return app
