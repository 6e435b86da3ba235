from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import SCHEDULES_TABLE
from ..database.connection import DataStoreConnection
from ..database.remote_base import fetchall, fetchone, remote_call
from .model import ScheduleEntry, ScheduleId
from .repository import ScheduleRepository


class SupabaseScheduleRepository(ScheduleRepository):
    def __init__(self, conn: DataStoreConnection):
        self._conn = conn

    def list_range(self, *, start: date, end: date) -> Sequence[ScheduleEntry]:
        with remote_call(SCHEDULES_TABLE, "fetch schedules"):
            res = (
                self._conn.table(SCHEDULES_TABLE)
                .select("*")
                .gte("date", start.isoformat())
                .lte("date", end.isoformat())
                .order("date", desc=False)
                .execute()
            )
        return [ScheduleEntry.from_row(r) for r in fetchall(res)]

    def get_by_id(self, schedule_id: ScheduleId) -> Optional[ScheduleEntry]:
        with remote_call(SCHEDULES_TABLE, "fetch schedule"):
            res = self._conn.table(SCHEDULES_TABLE).select("*").eq("id", schedule_id).limit(1).execute()
        row = fetchone(res)
        return ScheduleEntry.from_row(row) if row else None

    def insert_many(self, rows: Sequence[dict]) -> int:
        with remote_call(SCHEDULES_TABLE, "insert"):
            res = self._conn.table(SCHEDULES_TABLE).insert(list(rows)).execute()
        return len(fetchall(res))

    def update(self, schedule_id: ScheduleId, row: dict) -> bool:
        with remote_call(SCHEDULES_TABLE, "update"):
            res = self._conn.table(SCHEDULES_TABLE).update(row).eq("id", schedule_id).execute()
        return bool(fetchall(res))

    def delete(self, schedule_id: ScheduleId) -> bool:
        with remote_call(SCHEDULES_TABLE, "delete"):
            res = self._conn.table(SCHEDULES_TABLE).delete().eq("id", schedule_id).execute()
        return bool(fetchall(res))
