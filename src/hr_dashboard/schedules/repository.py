from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry, ScheduleId


class ScheduleRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[ScheduleEntry]:
        """Entries with start <= date <= end, ordered by date ascending."""

        raise NotImplementedError

    def get_by_id(self, schedule_id: ScheduleId) -> Optional[ScheduleEntry]:
        raise NotImplementedError

    def insert_many(self, rows: Sequence[dict]) -> int:
        """Bulk insert; returns the number of rows written."""

        raise NotImplementedError

    def update(self, schedule_id: ScheduleId, row: dict) -> bool:
        raise NotImplementedError

    def delete(self, schedule_id: ScheduleId) -> bool:
        raise NotImplementedError
