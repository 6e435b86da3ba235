from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import as_date, as_datetime
from ..common.validators import optional_str
from ..core.enums import TimeOffStatus

RequestId = Union[int, str]


@dataclass(frozen=True)
class TimeOffRequest:
    id: RequestId
    employee_id: Union[int, str, None]
    start_date: date
    end_date: date
    type: str
    status: TimeOffStatus
    reason: str = ""
    employee_name: str = ""
    created_at: Optional[datetime] = None

    @property
    def days(self) -> int:
        """Inclusive number of calendar days."""
        return (self.end_date - self.start_date).days + 1

    @property
    def period(self) -> str:
        if self.start_date == self.end_date:
            return self.start_date.isoformat()
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TimeOffRequest":
        # Embedded join: {"employees": {"name": ...}}
        joined = row.get("employees") or {}
        try:
            status = TimeOffStatus(row.get("status") or TimeOffStatus.PENDING.value)
        except ValueError:
            status = TimeOffStatus.PENDING
        return cls(
            id=row["id"],
            employee_id=row.get("employee_id"),
            start_date=as_date(row["start_date"]),
            end_date=as_date(row["end_date"]),
            type=row.get("type") or "",
            status=status,
            reason=row.get("reason") or "",
            employee_name=(joined.get("name") if isinstance(joined, dict) else "") or "Unknown",
            created_at=as_datetime(row.get("created_at")),
        )

    def to_view(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "period": self.period,
            "days": self.days,
            "type": self.type,
            "status": self.status.value,
            "reason": self.reason,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class TimeOffForm:
    employee_id: str = ""
    type: str = ""
    start_date: str = ""
    end_date: str = ""
    reason: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TimeOffForm":
        return cls(
            employee_id=optional_str(data.get("employee_id")),
            type=optional_str(data.get("type")),
            start_date=optional_str(data.get("start_date")),
            end_date=optional_str(data.get("end_date")),
            reason=optional_str(data.get("reason")),
        )
