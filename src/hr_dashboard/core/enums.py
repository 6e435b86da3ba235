from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Employment status stored on the employee row."""

    ACTIVE = "active"
    ON_LEAVE = "on-leave"
    INACTIVE = "inactive"


class TimeOffStatus(str, Enum):
    """Approval flow state of a time-off request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TimeOffType(str, Enum):
    HOLIDAY = "Holiday"
    SICK_LEAVE = "Sick Leave"
    MEDICAL_APPOINTMENT = "Medical Appointment"
    PERSONAL = "Personal"


class ShiftKind(str, Enum):
    """Label derived from the morning/afternoon flags of a schedule entry."""

    FULL_DAY = "Full Day"
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    OFF = "Off"


class LaiArticle(str, Enum):
    """Compliance article an intern is enrolled under."""

    ART_14 = "14LAI"
    ART_16 = "16LAI"
