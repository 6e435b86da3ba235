from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, List, Optional

from ..core.constants import WORKING_DAYS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse HH:MM (or HH:MM:SS as returned by the data platform) into time."""
    value = value.strip()
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def trim_hm(value: Optional[str]) -> str:
    """"09:00:00" -> "09:00"."""
    if not value:
        return ""
    return value[:5] if len(value) >= 5 else value


def as_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value)[:10])


def as_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    # Timestamps come back as ISO 8601, sometimes with a trailing "Z".
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def week_start_for(day: date) -> date:
    """Monday of the week containing day."""
    return day - timedelta(days=day.weekday())


def week_dates(week_start: date) -> List[date]:
    """The working days (Monday..Saturday) of the week starting at week_start."""
    monday = week_start_for(week_start)
    return [monday + timedelta(days=i) for i in range(WORKING_DAYS)]


def previous_week(week_start: date) -> date:
    return week_start_for(week_start) - timedelta(weeks=1)


def next_week(week_start: date) -> date:
    return week_start_for(week_start) + timedelta(weeks=1)


def minutes_between(start: time, end: time) -> int:
    return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
