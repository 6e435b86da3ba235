from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import as_date, trim_hm
from ..common.validators import as_bool, optional_str
from ..core.enums import ShiftKind

ScheduleId = Union[int, str]


def shift_kind(morning: bool, afternoon: bool) -> ShiftKind:
    if morning and afternoon:
        return ShiftKind.FULL_DAY
    if morning:
        return ShiftKind.MORNING
    if afternoon:
        return ShiftKind.AFTERNOON
    return ShiftKind.OFF


@dataclass(frozen=True)
class ScheduleEntry:
    """A planned shift (planning, not actuals)."""

    id: ScheduleId
    employee_name: str
    date: date
    start_time: str
    end_time: str
    morning: bool = False
    afternoon: bool = False
    recurring: bool = False

    @property
    def kind(self) -> ShiftKind:
        return shift_kind(self.morning, self.afternoon)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ScheduleEntry":
        return cls(
            id=row["id"],
            employee_name=row.get("employee_name") or "",
            date=as_date(row["date"]),
            start_time=str(row.get("start_time") or ""),
            end_time=str(row.get("end_time") or ""),
            morning=bool(row.get("morning")),
            afternoon=bool(row.get("afternoon")),
            recurring=bool(row.get("recurring")),
        )

    def to_view(self) -> dict:
        return {
            "id": self.id,
            "employee_name": self.employee_name,
            "date": self.date.isoformat(),
            "start_time": trim_hm(self.start_time),
            "end_time": trim_hm(self.end_time),
            "morning": self.morning,
            "afternoon": self.afternoon,
            "recurring": self.recurring,
            "shift": self.kind.value,
        }


@dataclass(frozen=True)
class ScheduleForm:
    """Add/Edit dialog state. until_date only matters when adding a recurring entry."""

    employee_name: str = ""
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    morning: bool = False
    afternoon: bool = False
    recurring: bool = False
    until_date: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ScheduleForm":
        return cls(
            employee_name=optional_str(data.get("employee_name")),
            date=optional_str(data.get("date")),
            start_time=optional_str(data.get("start_time")),
            end_time=optional_str(data.get("end_time")),
            morning=as_bool(data.get("morning")),
            afternoon=as_bool(data.get("afternoon")),
            recurring=as_bool(data.get("recurring")),
            until_date=optional_str(data.get("until_date")),
        )

    @classmethod
    def from_entry(cls, entry: ScheduleEntry) -> "ScheduleForm":
        """Prefill for the edit dialog."""
        return cls(
            employee_name=entry.employee_name,
            date=entry.date.isoformat(),
            start_time=trim_hm(entry.start_time),
            end_time=trim_hm(entry.end_time),
            morning=entry.morning,
            afternoon=entry.afternoon,
            recurring=entry.recurring,
        )

    def row_for(self, day: date, *, recurring: Optional[bool] = None) -> dict:
        return {
            "employee_name": self.employee_name,
            "date": day.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "morning": self.morning,
            "afternoon": self.afternoon,
            "recurring": self.recurring if recurring is None else recurring,
        }
