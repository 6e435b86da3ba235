from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, form_data, ok
from ..core.exceptions import DomainError
from ..container import Container
from .model import TimeOffForm


def register(app: Flask, container: Container) -> None:
    service = container.time_off_service

    def _listing():
        status_filter = request.args.get("status", "all")
        return {
            "filter": status_filter,
            "requests": [r.to_view() for r in service.list(status_filter=status_filter)],
        }

    @app.route("/api/time-off", methods=["GET"], endpoint="time_off_list")
    def time_off_list():
        try:
            return ok(_listing())
        except DomainError as e:
            return fail(e)

    @app.route("/api/time-off", methods=["POST"], endpoint="time_off_submit")
    def time_off_submit():
        try:
            service.submit(TimeOffForm.from_mapping(form_data()))
            return ok(_listing(), message="Request submitted", status=201)
        except DomainError as e:
            return fail(e)

    @app.route("/api/time-off/<request_id>/approve", methods=["POST"], endpoint="time_off_approve")
    def time_off_approve(request_id: str):
        try:
            service.approve(request_id)
            return ok(_listing(), message="Request approved")
        except DomainError as e:
            return fail(e)

    @app.route("/api/time-off/<request_id>/reject", methods=["POST"], endpoint="time_off_reject")
    def time_off_reject(request_id: str):
        try:
            service.reject(request_id)
            return ok(_listing(), message="Request rejected")
        except DomainError as e:
            return fail(e)
