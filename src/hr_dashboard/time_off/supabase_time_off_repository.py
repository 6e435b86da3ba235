from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import TIME_OFF_TABLE
from ..core.enums import TimeOffStatus
from ..database.connection import DataStoreConnection
from ..database.remote_base import count_of, fetchall, fetchone, remote_call
from .model import RequestId, TimeOffRequest
from .repository import TimeOffRepository

SELECT_WITH_EMPLOYEE = "*, employees(name)"


class SupabaseTimeOffRepository(TimeOffRepository):
    def __init__(self, conn: DataStoreConnection):
        self._conn = conn

    def list_recent(self, *, limit: Optional[int] = None) -> Sequence[TimeOffRequest]:
        with remote_call(TIME_OFF_TABLE, "fetch requests"):
            query = self._conn.table(TIME_OFF_TABLE).select(SELECT_WITH_EMPLOYEE).order("created_at", desc=True)
            if limit is not None:
                query = query.limit(int(limit))
            res = query.execute()
        return [TimeOffRequest.from_row(r) for r in fetchall(res)]

    def get_by_id(self, request_id: RequestId) -> Optional[TimeOffRequest]:
        with remote_call(TIME_OFF_TABLE, "fetch request"):
            res = (
                self._conn.table(TIME_OFF_TABLE)
                .select(SELECT_WITH_EMPLOYEE)
                .eq("id", request_id)
                .limit(1)
                .execute()
            )
        row = fetchone(res)
        return TimeOffRequest.from_row(row) if row else None

    def create(self, payload: dict) -> None:
        with remote_call(TIME_OFF_TABLE, "submit request"):
            self._conn.table(TIME_OFF_TABLE).insert(payload).execute()

    def set_status(self, request_id: RequestId, status: TimeOffStatus) -> bool:
        with remote_call(TIME_OFF_TABLE, "update request"):
            res = (
                self._conn.table(TIME_OFF_TABLE)
                .update({"status": status.value})
                .eq("id", request_id)
                .eq("status", TimeOffStatus.PENDING.value)
                .execute()
            )
        return bool(fetchall(res))

    def count_by_status(self, status: TimeOffStatus) -> int:
        with remote_call(TIME_OFF_TABLE, "count requests"):
            res = (
                self._conn.table(TIME_OFF_TABLE)
                .select("*", count="exact", head=True)
                .eq("status", status.value)
                .execute()
            )
        return count_of(res)
