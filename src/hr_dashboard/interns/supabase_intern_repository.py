from __future__ import annotations

from typing import Sequence

from ..core.constants import DEADLINES_TABLE, INTERNS_TABLE
from ..database.connection import DataStoreConnection
from ..database.remote_base import fetchall, remote_call
from .model import DeadlineId, Intern
from .repository import InternRepository

SELECT_WITH_DEADLINES = "*, echeances(*, employee:employee_id(first_name, last_name))"


class SupabaseInternRepository(InternRepository):
    def __init__(self, conn: DataStoreConnection):
        self._conn = conn

    def list_with_deadlines(self) -> Sequence[Intern]:
        with remote_call(INTERNS_TABLE, "fetch interns"):
            res = self._conn.table(INTERNS_TABLE).select(SELECT_WITH_DEADLINES).execute()
        return [Intern.from_row(r) for r in fetchall(res)]

    def exists(self, intern_id) -> bool:
        with remote_call(INTERNS_TABLE, "fetch intern"):
            res = self._conn.table(INTERNS_TABLE).select("id").eq("id", intern_id).limit(1).execute()
        return bool(fetchall(res))

    def create(self, payload: dict) -> None:
        with remote_call(INTERNS_TABLE, "add intern"):
            self._conn.table(INTERNS_TABLE).insert(payload).execute()

    def add_deadline(self, payload: dict) -> None:
        with remote_call(DEADLINES_TABLE, "add deadline"):
            self._conn.table(DEADLINES_TABLE).insert(payload).execute()

    def mark_deadline_done(self, deadline_id: DeadlineId) -> bool:
        with remote_call(DEADLINES_TABLE, "update deadline"):
            res = self._conn.table(DEADLINES_TABLE).update({"is_done": True}).eq("id", deadline_id).execute()
        return bool(fetchall(res))
