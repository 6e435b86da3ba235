from __future__ import annotations

from dataclasses import asdict

from flask import Flask, request

from ..common.datetime_utils import next_week, previous_week, today_local
from ..common.responses import fail, form_data, ok
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .model import ScheduleForm


def register(app: Flask, container: Container) -> None:
    service = container.schedule_service

    def _render_week(week_start):
        view = request.args.get("view", "weekly")
        if view == "daily":
            data = service.daily_view(week_start)
        elif view == "weekly":
            data = service.weekly_view(week_start)
        else:
            raise ValidationError("view must be 'weekly' or 'daily'")
        data["previous_week"] = previous_week(week_start).isoformat()
        data["next_week"] = next_week(week_start).isoformat()
        return data

    def _current_week():
        return service.week_of(request.args.get("week"), default=today_local())

    @app.route("/api/schedules", methods=["GET"], endpoint="schedules_view")
    def schedules_view():
        try:
            return ok(_render_week(_current_week()))
        except DomainError as e:
            return fail(e)

    @app.route("/api/schedules", methods=["POST"], endpoint="schedules_add")
    def schedules_add():
        try:
            form = ScheduleForm.from_mapping(form_data())
            created = service.add(form)
            return ok(_render_week(_current_week()), message=f"{created} shift(s) saved", status=201)
        except DomainError as e:
            return fail(e)

    @app.route("/api/schedules/<schedule_id>", methods=["GET"], endpoint="schedules_edit_form")
    def schedules_edit_form(schedule_id: str):
        try:
            return ok(asdict(service.edit_form(schedule_id)))
        except DomainError as e:
            return fail(e)

    @app.route("/api/schedules/<schedule_id>", methods=["PUT"], endpoint="schedules_edit")
    def schedules_edit(schedule_id: str):
        try:
            service.edit(schedule_id, ScheduleForm.from_mapping(form_data()))
            return ok(_render_week(_current_week()), message="Schedule updated")
        except DomainError as e:
            return fail(e)

    @app.route("/api/schedules/<schedule_id>", methods=["DELETE"], endpoint="schedules_delete")
    def schedules_delete(schedule_id: str):
        try:
            service.delete(schedule_id)
            return ok(_render_week(_current_week()), message="Schedule deleted")
        except DomainError as e:
            return fail(e)
