from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, form_data, ok
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _view(employees) -> list[dict]:
        return [e.to_view() for e in employees]

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        try:
            employees = container.employee_service.list(search=request.args.get("search", ""))
            return ok(_view(employees))
        except DomainError as e:
            return fail(e)

    @app.route("/api/employees", methods=["POST"], endpoint="employees_add")
    def employees_add():
        try:
            employees = container.employee_service.add(form_data())
            return ok(_view(employees), message="Employee added", status=201)
        except DomainError as e:
            return fail(e)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        try:
            employees = container.employee_service.update(employee_id, form_data())
            return ok(_view(employees), message="Employee updated")
        except DomainError as e:
            return fail(e)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="employees_delete")
    def employees_delete(employee_id: str):
        try:
            employees = container.employee_service.delete(employee_id)
            return ok(_view(employees), message="Employee deleted")
        except DomainError as e:
            return fail(e)
