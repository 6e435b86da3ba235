from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Mapping, Optional, Union

from ..common.datetime_utils import as_date
from ..common.validators import optional_str

InternId = Union[int, str]
DeadlineId = Union[int, str]


@dataclass(frozen=True)
class Deadline:
    """Échéance: a compliance milestone tied to an intern."""

    id: DeadlineId
    title: str
    deadline: date
    description: str = ""
    is_done: bool = False
    stagiaire_id: Optional[InternId] = None
    employee_id: Optional[Union[int, str]] = None
    assignee: str = ""

    def is_overdue(self, today: date) -> bool:
        return not self.is_done and self.deadline < today

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Deadline":
        employee = row.get("employee") or {}
        assignee = ""
        if isinstance(employee, dict):
            assignee = f"{employee.get('first_name') or ''} {employee.get('last_name') or ''}".strip()
        return cls(
            id=row["id"],
            title=row.get("title") or "",
            deadline=as_date(row["deadline"]),
            description=row.get("description") or "",
            is_done=bool(row.get("is_done")),
            stagiaire_id=row.get("stagiaire_id"),
            employee_id=row.get("employee_id"),
            assignee=assignee,
        )

    def to_view(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "deadline": self.deadline.isoformat(),
            "description": self.description,
            "is_done": self.is_done,
            "employee_id": self.employee_id,
            "assignee": self.assignee,
        }


@dataclass(frozen=True)
class Intern:
    """Stagiaire: trainee tracked for regulatory compliance."""

    id: InternId
    first_name: str
    last_name: str
    email: str = ""
    lai_article: str = ""
    rate: int = 0
    deadlines: List[Deadline] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Intern":
        deadlines = [Deadline.from_row(d) for d in (row.get("echeances") or [])]
        deadlines.sort(key=lambda d: d.deadline)
        return cls(
            id=row["id"],
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            email=row.get("email") or "",
            lai_article=row.get("lai_article") or "",
            rate=int(row.get("rate") or 0),
            deadlines=deadlines,
        )

    def to_view(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "full_name": self.full_name,
            "email": self.email,
            "lai_article": self.lai_article,
            "rate": self.rate,
            "deadlines": [d.to_view() for d in self.deadlines],
        }


@dataclass(frozen=True)
class InternForm:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    lai_article: str = ""
    rate: str = "0"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InternForm":
        return cls(
            first_name=optional_str(data.get("first_name")),
            last_name=optional_str(data.get("last_name")),
            email=optional_str(data.get("email")),
            lai_article=optional_str(data.get("lai_article")),
            rate=optional_str(data.get("rate")) or "0",
        )


@dataclass(frozen=True)
class DeadlineForm:
    title: str = ""
    date: str = ""
    comment: str = ""
    assigned_to: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DeadlineForm":
        return cls(
            title=optional_str(data.get("title")),
            date=optional_str(data.get("date")),
            comment=optional_str(data.get("comment")),
            assigned_to=optional_str(data.get("assigned_to")),
        )
