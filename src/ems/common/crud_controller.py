from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from flask import Blueprint, flash, redirect, render_template, request, url_for

from ..core.exceptions import IdMismatchError, NotFoundError, PersistenceError, ValidationError
from .crud import CrudService
from .log import get_logger, log_validation_errors


@dataclass(frozen=True)
class Column:
    header: str
    getter: Callable[[Any], Any]

    def render(self, item: Any) -> Any:
        value = self.getter(item)
        return "" if value is None else value


@dataclass(frozen=True)
class CrudPage:
    """Labels and columns of one entity screen.

    ``title`` prefixes id messages ("Leave ID not provided."), ``singular`` and
    ``plural`` fill the other flash messages.
    """

    name: str
    title: str
    singular: str
    plural: str
    columns: Sequence[Column] = field(default_factory=tuple)
    detail_fields: Sequence[Column] = field(default_factory=tuple)
    deleted_message: str = "{Singular} deleted successfully!"
    # Fixed choices for select inputs, keyed by form field.
    options: Mapping[str, Sequence[str]] = field(default_factory=dict)

    @property
    def capitalized(self) -> str:
        return self.singular[:1].upper() + self.singular[1:]

    @property
    def template_dir(self) -> str:
        return self.name

    def not_found(self) -> str:
        return f"{self.capitalized} not found."

    def id_missing(self) -> str:
        return f"{self.title} ID not provided."


def crud_blueprint(page: CrudPage, service: CrudService, *, url_prefix: str) -> Blueprint:
    """Blueprint with the Index / Details / Create / Edit / Delete screens of one entity."""
    bp = Blueprint(page.name, __name__, url_prefix=url_prefix)
    logger = get_logger(f"ems.{page.name}")

    def to_index():
        return redirect(url_for(f"{page.name}.index"))

    def choices(current_id: Optional[int] = None) -> list[tuple[int, str]]:
        try:
            return service.employee_choices(current_id=current_id)
        except PersistenceError as exc:
            logger.error("choices_failed", error=str(exc.cause or exc))
            return []

    def render_form(form: dict, errors: dict, *, mode: str, entity_id: Optional[int] = None):
        return render_template(
            f"{page.template_dir}/form.html",
            page=page,
            form=form,
            errors=errors,
            mode=mode,
            entity_id=entity_id,
            employees=choices(entity_id),
        )

    def load(entity_id: Optional[int], operation: str):
        """Fetch a record for a read screen, or return the redirect to show instead."""
        if entity_id is None:
            flash(page.id_missing(), "error")
            return None, to_index()
        try:
            return service.get(entity_id), None
        except NotFoundError:
            flash(page.not_found(), "error")
            return None, to_index()
        except PersistenceError as exc:
            logger.error(f"{operation}_load_failed", entity_id=entity_id, error=str(exc.cause or exc))
            flash(f"Error loading {page.singular} details.", "error")
            return None, to_index()

    @bp.route("", endpoint="index")
    @bp.route("/Index", endpoint="index")
    def index():
        try:
            items = service.list_all()
            logger.info("loaded", count=len(items))
        except PersistenceError as exc:
            logger.error("load_failed", error=str(exc.cause or exc))
            flash(f"Error loading {page.plural}. Please try again.", "error")
            items = []
        return render_template("crud/index.html", page=page, items=items)

    @bp.route("/Details", defaults={"entity_id": None}, endpoint="details")
    @bp.route("/Details/<int:entity_id>", endpoint="details")
    def details(entity_id: Optional[int]):
        item, response = load(entity_id, "details")
        if response is not None:
            return response
        return render_template("crud/details.html", page=page, item=item)

    @bp.route("/Create", methods=["GET", "POST"], endpoint="create")
    def create():
        if request.method == "GET":
            try:
                employees = service.employee_choices()
            except PersistenceError as exc:
                logger.error("create_form_failed", error=str(exc.cause or exc))
                flash("Error loading create form.", "error")
                return to_index()
            return render_template(
                f"{page.template_dir}/form.html",
                page=page,
                form=service.new_form(),
                errors={},
                mode="create",
                entity_id=None,
                employees=employees,
            )

        form = request.form.to_dict()
        logger.info("create_start")
        try:
            service.create(form)
        except ValidationError as exc:
            log_validation_errors(logger, "create", exc.errors)
            flash("Please fix the validation errors below.", "error")
            return render_form(form, exc.errors, mode="create")
        except PersistenceError as exc:
            logger.error("create_failed", error=str(exc.cause or exc))
            flash(f"Error creating {page.singular}. Please try again.", "error")
            return render_form(form, {}, mode="create")

        logger.info("create_success")
        flash(f"{page.capitalized} created successfully!", "success")
        return to_index()

    @bp.route("/Edit", defaults={"entity_id": None}, methods=["GET", "POST"], endpoint="edit")
    @bp.route("/Edit/<int:entity_id>", methods=["GET", "POST"], endpoint="edit")
    def edit(entity_id: Optional[int]):
        if request.method == "GET" or entity_id is None:
            item, response = load(entity_id, "edit")
            if response is not None:
                return response
            return render_form(service.to_form(item), {}, mode="edit", entity_id=entity_id)

        form = request.form.to_dict()
        logger.info("edit_start", entity_id=entity_id)
        try:
            service.update(entity_id, form)
        except IdMismatchError as exc:
            logger.warning("edit_id_mismatch", path_id=exc.path_id, payload_id=exc.payload_id)
            flash(f"{page.title} ID mismatch.", "error")
            return to_index()
        except NotFoundError:
            logger.warning("edit_not_found", entity_id=entity_id)
            flash(page.not_found(), "error")
            return to_index()
        except ValidationError as exc:
            log_validation_errors(logger, "edit", exc.errors)
            flash("Please fix the validation errors below.", "error")
            return render_form(form, exc.errors, mode="edit", entity_id=entity_id)
        except PersistenceError as exc:
            logger.error("edit_failed", entity_id=entity_id, error=str(exc.cause or exc))
            flash(f"Error updating {page.singular}. Please try again.", "error")
            return render_form(form, {}, mode="edit", entity_id=entity_id)

        logger.info("edit_success", entity_id=entity_id)
        flash(f"{page.capitalized} updated successfully!", "success")
        return to_index()

    @bp.route("/Delete", defaults={"entity_id": None}, methods=["GET", "POST"], endpoint="delete")
    @bp.route("/Delete/<int:entity_id>", methods=["GET", "POST"], endpoint="delete")
    def delete(entity_id: Optional[int]):
        if request.method == "GET" or entity_id is None:
            item, response = load(entity_id, "delete")
            if response is not None:
                return response
            return render_template("crud/delete.html", page=page, item=item)

        logger.info("delete_start", entity_id=entity_id)
        try:
            name = service.delete(entity_id)
        except NotFoundError:
            logger.warning("delete_not_found", entity_id=entity_id)
            flash(page.not_found(), "error")
            return to_index()
        except PersistenceError as exc:
            logger.error("delete_failed", entity_id=entity_id, error=str(exc.cause or exc))
            flash(f"Error deleting {page.singular}. Please try again.", "error")
            return to_index()

        logger.info("delete_success", entity_id=entity_id)
        flash(page.deleted_message.format(Singular=page.capitalized, name=name), "success")
        return to_index()

    return bp
