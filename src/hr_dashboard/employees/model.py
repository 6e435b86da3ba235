from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Union

from ..core.enums import EmployeeStatus

EmployeeId = Union[int, str]

PAYLOAD_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "position",
    "department",
    "phone",
    "location",
    "avatar",
    "status",
)


def _first_str(row: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value if isinstance(value, str) else ""
    return ""


def initials(text: str) -> str:
    """"Sarah Johnson" -> "SJ" (at most two letters)."""
    return "".join(part[0] for part in text.split(" ") if part)[:2].upper()


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object mirrored from a remote row (no data access code).
    """

    id: EmployeeId
    first_name: str = ""
    last_name: str = ""
    name: str = ""
    email: str = ""
    position: str = ""
    department: str = ""
    phone: str = ""
    location: str = ""
    avatar: str = ""
    status: str = EmployeeStatus.ACTIVE.value

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initials(self) -> str:
        return initials(self.avatar or self.display_name)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        """Normalise a remote row; older tables use different column names."""
        raw_id = row.get("id", row.get("employee_id"))
        return cls(
            id=raw_id if isinstance(raw_id, (int, str)) else "",
            first_name=_first_str(row, "first_name", "firstname", "firstName"),
            last_name=_first_str(row, "last_name", "lastname", "lastName"),
            name=_first_str(row, "name"),
            email=_first_str(row, "email"),
            position=_first_str(row, "position", "job_title"),
            department=_first_str(row, "department", "department_name"),
            phone=_first_str(row, "phone", "phone_number"),
            location=_first_str(row, "location", "office_location"),
            avatar=_first_str(row, "avatar", "avatar_url"),
            status=_first_str(row, "status") or EmployeeStatus.ACTIVE.value,
        )

    def to_view(self) -> dict:
        data = asdict(self)
        data["display_name"] = self.display_name
        data["initials"] = self.initials
        return data


@dataclass(frozen=True)
class EmployeeForm:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    position: str = ""
    department: str = ""
    phone: str = ""
    location: str = ""
    avatar: str = ""
    status: str = EmployeeStatus.ACTIVE.value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EmployeeForm":
        values = {key: str(data.get(key) or "").strip() for key in PAYLOAD_FIELDS}
        values["status"] = values["status"] or EmployeeStatus.ACTIVE.value
        return cls(**values)

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeForm":
        """Prefill from the stored row, so partial updates keep untouched fields."""
        return cls(**{key: getattr(employee, key) for key in PAYLOAD_FIELDS})

    def to_payload(self) -> dict:
        return {key: getattr(self, key) for key in PAYLOAD_FIELDS}
