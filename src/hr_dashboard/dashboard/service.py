from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from ..common.datetime_utils import week_start_for
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..employees.repository import EmployeeRepository
from ..time_off.service import TimeOffService
from ..timesheets.service import TimesheetService


@dataclass(frozen=True)
class DashboardSummary:
    total_employees: int
    pending_requests: int
    hours_this_week: str
    recent_activity: List[dict]


class DashboardService:
    def __init__(self, employees: EmployeeRepository, time_off: TimeOffService, timesheets: TimesheetService):
        self._employees = employees
        self._time_off = time_off
        self._timesheets = timesheets

    def summary(self, *, today: date) -> DashboardSummary:
        monday = week_start_for(today)
        minutes = self._timesheets.minutes_between(monday, monday + timedelta(days=6))

        activity = []
        for r in self._time_off.recent(RECENT_ACTIVITY_LIMIT):
            activity.append(
                {
                    "name": r.employee_name,
                    "action": f"submitted {r.type.lower()} request",
                    "time": r.created_at.isoformat() if r.created_at else None,
                    "status": r.status.value,
                }
            )

        return DashboardSummary(
            total_employees=self._employees.count(),
            pending_requests=self._time_off.pending_count(),
            hours_this_week=f"{minutes // 60:02d}:{minutes % 60:02d}",
            recent_activity=activity,
        )
