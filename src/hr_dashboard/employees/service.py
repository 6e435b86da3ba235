from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Mapping, Sequence

from ..common.validators import require_fields
from ..core.exceptions import NotFoundError
from .model import PAYLOAD_FIELDS, Employee, EmployeeForm, EmployeeId
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("first_name", "last_name", "email")


class EmployeeService:
    """Use cases of the employees page: list/search, add, edit, delete."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list(self, *, search: str = "") -> Sequence[Employee]:
        employees = self._employees.list_all()
        term = (search or "").strip().lower()
        if not term:
            return list(employees)
        return [e for e in employees if term in self._haystack(e)]

    @staticmethod
    def _haystack(employee: Employee) -> str:
        return " ".join(
            [employee.first_name, employee.last_name, employee.position, employee.department]
        ).lower()

    def add(self, data: Mapping[str, Any]) -> Sequence[Employee]:
        require_fields(data, REQUIRED_FIELDS, "Names and Email are required")
        form = EmployeeForm.from_mapping(data)
        self._employees.create(form.to_payload())
        logger.info("Employee added: %s %s", form.first_name, form.last_name)
        return self.list()

    def update(self, employee_id: EmployeeId, data: Mapping[str, Any]) -> Sequence[Employee]:
        current = self._employees.get_by_id(employee_id)
        if not current:
            raise NotFoundError("Employee not found")

        merged = EmployeeForm.from_employee(current).to_payload()
        merged.update({key: data[key] for key in PAYLOAD_FIELDS if key in data})
        require_fields(merged, REQUIRED_FIELDS, "Names and Email are required")

        form = EmployeeForm.from_mapping(merged)
        if not self._employees.update(employee_id, form.to_payload()):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s updated", employee_id)
        return self.list()

    def delete(self, employee_id: EmployeeId) -> Sequence[Employee]:
        if not self._employees.delete(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s deleted", employee_id)
        return self.list()

    def status_counts(self) -> dict[str, int]:
        return dict(Counter(e.status for e in self._employees.list_all()))
