from __future__ import annotations

from flask import Flask

from ..common.responses import fail, form_data, ok
from ..core.exceptions import DomainError
from ..container import Container
from .model import TimesheetForm


def register(app: Flask, container: Container) -> None:
    def _view(entries) -> list[dict]:
        return [e.to_view() for e in entries]

    @app.route("/api/timesheets", methods=["GET"], endpoint="timesheets_list")
    def timesheets_list():
        try:
            return ok(_view(container.timesheet_service.list()))
        except DomainError as e:
            return fail(e)

    @app.route("/api/timesheets", methods=["POST"], endpoint="timesheets_add")
    def timesheets_add():
        try:
            entries = container.timesheet_service.add(TimesheetForm.from_mapping(form_data()))
            return ok(_view(entries), message="Timesheet saved", status=201)
        except DomainError as e:
            return fail(e)

    @app.route("/api/timesheets/<entry_id>", methods=["DELETE"], endpoint="timesheets_delete")
    def timesheets_delete(entry_id: str):
        try:
            return ok(_view(container.timesheet_service.delete(entry_id)), message="Timesheet deleted")
        except DomainError as e:
            return fail(e)
