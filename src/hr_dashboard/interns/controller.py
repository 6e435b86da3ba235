from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import today_local
from ..common.responses import fail, form_data, ok
from ..core.exceptions import DomainError
from ..container import Container
from .model import DeadlineForm, InternForm


def register(app: Flask, container: Container) -> None:
    service = container.intern_service

    def _view(interns) -> list[dict]:
        return [i.to_view() for i in interns]

    @app.route("/api/interns", methods=["GET"], endpoint="interns_list")
    def interns_list():
        try:
            return ok(_view(service.list()))
        except DomainError as e:
            return fail(e)

    @app.route("/api/interns", methods=["POST"], endpoint="interns_create")
    def interns_create():
        try:
            interns = service.create(InternForm.from_mapping(form_data()))
            return ok(_view(interns), message="Intern added", status=201)
        except DomainError as e:
            return fail(e)

    @app.route("/api/interns/<intern_id>/deadlines", methods=["POST"], endpoint="interns_add_deadline")
    def interns_add_deadline(intern_id: str):
        try:
            interns = service.add_deadline(intern_id, DeadlineForm.from_mapping(form_data()))
            return ok(_view(interns), message="Deadline added", status=201)
        except DomainError as e:
            return fail(e)

    @app.route("/api/deadlines/<deadline_id>/done", methods=["POST"], endpoint="deadlines_done")
    def deadlines_done(deadline_id: str):
        try:
            return ok(_view(service.complete_deadline(deadline_id)), message="Deadline completed")
        except DomainError as e:
            return fail(e)

    @app.route("/api/deadlines/overdue", methods=["GET"], endpoint="deadlines_overdue")
    def deadlines_overdue():
        try:
            pairs = service.overdue(today_local())
            return ok([{"intern": i.full_name, "intern_id": i.id, **d.to_view()} for i, d in pairs])
        except DomainError as e:
            return fail(e)
