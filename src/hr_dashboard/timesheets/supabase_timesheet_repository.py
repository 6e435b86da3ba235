from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.constants import TIMESHEET_TABLE
from ..database.connection import DataStoreConnection
from ..database.remote_base import fetchall, remote_call
from .model import TimesheetEntry, TimesheetId
from .repository import TimesheetRepository


class SupabaseTimesheetRepository(TimesheetRepository):
    def __init__(self, conn: DataStoreConnection):
        self._conn = conn

    def list_all(self) -> Sequence[TimesheetEntry]:
        with remote_call(TIMESHEET_TABLE, "fetch timesheets"):
            res = self._conn.table(TIMESHEET_TABLE).select("*").execute()
        return [TimesheetEntry.from_row(r) for r in fetchall(res)]

    def list_range(self, *, start: date, end: date) -> Sequence[TimesheetEntry]:
        with remote_call(TIMESHEET_TABLE, "fetch timesheets"):
            res = (
                self._conn.table(TIMESHEET_TABLE)
                .select("*")
                .gte("work_date", start.isoformat())
                .lte("work_date", end.isoformat())
                .execute()
            )
        return [TimesheetEntry.from_row(r) for r in fetchall(res)]

    def create(self, payload: dict) -> None:
        with remote_call(TIMESHEET_TABLE, "insert"):
            self._conn.table(TIMESHEET_TABLE).insert([payload]).execute()

    def delete(self, entry_id: TimesheetId) -> bool:
        with remote_call(TIMESHEET_TABLE, "delete"):
            res = self._conn.table(TIMESHEET_TABLE).delete().eq("id", entry_id).execute()
        return bool(fetchall(res))
