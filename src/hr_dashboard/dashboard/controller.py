from __future__ import annotations

from dataclasses import asdict

from flask import Flask

from ..common.datetime_utils import today_local
from ..common.responses import fail, ok
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        try:
            summary = container.dashboard_service.summary(today=today_local())
            return ok(asdict(summary))
        except DomainError as e:
            return fail(e)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return ok({"status": "ok"})
