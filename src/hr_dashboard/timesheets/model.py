from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..common.datetime_utils import as_date, minutes_between, parse_hhmm, trim_hm
from ..common.validators import as_bool, optional_str

TimesheetId = Union[int, str]

WINDOW_FIELDS = (
    ("morning", "morning_start", "morning_end"),
    ("afternoon", "afternoon_start", "afternoon_end"),
    ("evening", "evening_start", "evening_end"),
)


def _time_or_none(value: Any) -> Optional[time]:
    text = optional_str(value)
    return parse_hhmm(text) if text else None


@dataclass(frozen=True)
class TimesheetEntry:
    """Actual hours worked on one day, in up to three windows."""

    id: TimesheetId
    employee_id: Union[int, str]
    work_date: date
    morning_start: Optional[time] = None
    morning_end: Optional[time] = None
    afternoon_start: Optional[time] = None
    afternoon_end: Optional[time] = None
    has_evening: bool = False
    evening_start: Optional[time] = None
    evening_end: Optional[time] = None
    notes: str = ""

    def windows(self) -> List[Tuple[str, Optional[time], Optional[time]]]:
        out = []
        for label, start_key, end_key in WINDOW_FIELDS:
            if label == "evening" and not self.has_evening:
                continue
            out.append((label, getattr(self, start_key), getattr(self, end_key)))
        return out

    @property
    def worked_minutes(self) -> int:
        """Sum of the windows that have both bounds."""
        total = 0
        for _, start, end in self.windows():
            if start and end:
                total += max(minutes_between(start, end), 0)
        return total

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TimesheetEntry":
        return cls(
            id=row["id"],
            employee_id=row.get("employee_id"),
            work_date=as_date(row["work_date"]),
            morning_start=_time_or_none(row.get("morning_start")),
            morning_end=_time_or_none(row.get("morning_end")),
            afternoon_start=_time_or_none(row.get("afternoon_start")),
            afternoon_end=_time_or_none(row.get("afternoon_end")),
            has_evening=bool(row.get("has_evening")),
            evening_start=_time_or_none(row.get("evening_start")),
            evening_end=_time_or_none(row.get("evening_end")),
            notes=row.get("notes") or "",
        )

    def to_view(self) -> dict:
        def _fmt(t: Optional[time]) -> str:
            return t.strftime("%H:%M") if t else "-"

        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "work_date": self.work_date.isoformat(),
            "windows": [
                {"label": label, "start": _fmt(start), "end": _fmt(end)} for label, start, end in self.windows()
            ],
            "has_evening": self.has_evening,
            "notes": self.notes,
            "worked_minutes": self.worked_minutes,
        }


@dataclass(frozen=True)
class TimesheetForm:
    employee_id: str = ""
    work_date: str = ""
    morning_start: str = ""
    morning_end: str = ""
    afternoon_start: str = ""
    afternoon_end: str = ""
    has_evening: bool = False
    evening_start: str = ""
    evening_end: str = ""
    notes: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TimesheetForm":
        return cls(
            employee_id=optional_str(data.get("employee_id")),
            work_date=optional_str(data.get("work_date")),
            morning_start=trim_hm(optional_str(data.get("morning_start"))),
            morning_end=trim_hm(optional_str(data.get("morning_end"))),
            afternoon_start=trim_hm(optional_str(data.get("afternoon_start"))),
            afternoon_end=trim_hm(optional_str(data.get("afternoon_end"))),
            has_evening=as_bool(data.get("has_evening")),
            evening_start=trim_hm(optional_str(data.get("evening_start"))),
            evening_end=trim_hm(optional_str(data.get("evening_end"))),
            notes=optional_str(data.get("notes")),
        )

    def to_payload(self) -> dict:
        # Empty time inputs are stored as NULL; the evening window only when enabled.
        evening = self.has_evening
        return {
            "employee_id": int(self.employee_id) if self.employee_id.isdigit() else self.employee_id,
            "work_date": self.work_date,
            "morning_start": self.morning_start or None,
            "morning_end": self.morning_end or None,
            "afternoon_start": self.afternoon_start or None,
            "afternoon_end": self.afternoon_end or None,
            "has_evening": evening,
            "evening_start": (self.evening_start or None) if evening else None,
            "evening_end": (self.evening_end or None) if evening else None,
            "notes": self.notes,
        }
