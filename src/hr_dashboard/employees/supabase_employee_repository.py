from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_TABLE
from ..database.connection import DataStoreConnection
from ..database.remote_base import count_of, fetchall, fetchone, remote_call
from .model import Employee, EmployeeId
from .repository import EmployeeRepository


class SupabaseEmployeeRepository(EmployeeRepository):
    def __init__(self, conn: DataStoreConnection):
        self._conn = conn

    def list_all(self) -> Sequence[Employee]:
        with remote_call(EMPLOYEES_TABLE, "fetch employees"):
            res = self._conn.table(EMPLOYEES_TABLE).select("*").execute()
        return [Employee.from_row(r) for r in fetchall(res)]

    def get_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        with remote_call(EMPLOYEES_TABLE, "fetch employee"):
            res = self._conn.table(EMPLOYEES_TABLE).select("*").eq("id", employee_id).limit(1).execute()
        row = fetchone(res)
        return Employee.from_row(row) if row else None

    def create(self, payload: dict) -> None:
        with remote_call(EMPLOYEES_TABLE, "add employee"):
            self._conn.table(EMPLOYEES_TABLE).insert([payload]).execute()

    def update(self, employee_id: EmployeeId, payload: dict) -> bool:
        with remote_call(EMPLOYEES_TABLE, "update employee"):
            res = self._conn.table(EMPLOYEES_TABLE).update(payload).eq("id", employee_id).execute()
        return bool(fetchall(res))

    def delete(self, employee_id: EmployeeId) -> bool:
        with remote_call(EMPLOYEES_TABLE, "delete employee"):
            res = self._conn.table(EMPLOYEES_TABLE).delete().eq("id", employee_id).execute()
        return bool(fetchall(res))

    def count(self) -> int:
        with remote_call(EMPLOYEES_TABLE, "count employees"):
            res = self._conn.table(EMPLOYEES_TABLE).select("*", count="exact", head=True).execute()
        return count_of(res)
