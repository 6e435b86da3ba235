from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import TimesheetEntry, TimesheetId


class TimesheetRepository(Protocol):
    def list_all(self) -> Sequence[TimesheetEntry]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[TimesheetEntry]:
        raise NotImplementedError

    def create(self, payload: dict) -> None:
        raise NotImplementedError

    def delete(self, entry_id: TimesheetId) -> bool:
        raise NotImplementedError
