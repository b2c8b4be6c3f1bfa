from __future__ import annotations

import uuid

from flask import Blueprint, Flask, flash, render_template, request

from ..common.log import get_logger
from ..container import Container
from ..core.exceptions import PersistenceError
from .service import DashboardCounts

logger = get_logger(__name__)


def request_id() -> str:
    return request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID") or uuid.uuid4().hex


def register(app: Flask, container: Container) -> None:
    bp = Blueprint("home", __name__)

    @bp.route("/", endpoint="index")
    @bp.route("/Home", endpoint="index")
    @bp.route("/Home/Index", endpoint="index")
    def index():
        try:
            counts = container.dashboard_service.counts()
        except PersistenceError as exc:
            logger.error("dashboard_failed", error=str(exc.cause or exc))
            flash("Error loading dashboard figures.", "error")
            counts = DashboardCounts()
        return render_template("home/index.html", counts=counts)

    @bp.route("/Home/Privacy", endpoint="privacy")
    def privacy():
        return render_template("home/privacy.html")

    @bp.route("/Home/Error", endpoint="error")
    def error():
        response = app.make_response(render_template("home/error.html", request_id=request_id()))
        response.headers["Cache-Control"] = "no-store"
        return response

    app.register_blueprint(bp)

    @app.errorhandler(500)
    def internal_error(exc):
        rid = request_id()
        cause = getattr(exc, "original_exception", None) or exc
        logger.error(
            "unhandled_error",
            request_id=rid,
            method=request.method,
            path=request.path,
            error_type=type(cause).__name__,
            error=str(cause),
        )
        response = app.make_response((render_template("home/error.html", request_id=rid), 500))
        response.headers["Cache-Control"] = "no-store"
        return response
