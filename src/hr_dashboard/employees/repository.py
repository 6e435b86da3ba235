from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeId


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, payload: dict) -> None:
        raise NotImplementedError

    def update(self, employee_id: EmployeeId, payload: dict) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: EmployeeId) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        """Exact row count, without fetching the rows."""

        raise NotImplementedError
