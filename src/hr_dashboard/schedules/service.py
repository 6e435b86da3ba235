from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import parse_hhmm, parse_iso_date, week_dates, week_start_for
from ..common.validators import require_fields
from ..core.constants import UNKNOWN_DEPARTMENT
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import ScheduleEntry, ScheduleForm, ScheduleId
from .recurrence import expand_weekly, occurrence_count
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("employee_name", "date", "start_time", "end_time")


@dataclass(frozen=True)
class Week:
    start: date
    dates: List[date]
    entries: List[ScheduleEntry]

    @property
    def end(self) -> date:
        return self.dates[-1]


def group_by_department(
    entries: Sequence[ScheduleEntry], departments: Dict[str, str], day: date
) -> Dict[str, List[ScheduleEntry]]:
    """Entries of one day keyed by the employee's department, in first-seen order.

    Employees missing from the lookup, or with an empty department, land under "Unknown".
    """
    grouped: Dict[str, List[ScheduleEntry]] = {}
    for entry in entries:
        if entry.date != day:
            continue
        dept = departments.get(entry.employee_name) or UNKNOWN_DEPARTMENT
        grouped.setdefault(dept, []).append(entry)
    return grouped


def find_entry(entries: Sequence[ScheduleEntry], employee_name: str, day: date) -> Optional[ScheduleEntry]:
    for entry in entries:
        if entry.employee_name == employee_name and entry.date == day:
            return entry
    return None


class ScheduleService:
    """Use cases of the work schedule page (weekly grid, daily view, add/edit/delete)."""

    def __init__(self, schedules: ScheduleRepository, employees: EmployeeRepository):
        self._schedules = schedules
        self._employees = employees

    def fetch_week(self, week_start: date) -> Week:
        dates = week_dates(week_start)
        entries = self._schedules.list_range(start=dates[0], end=dates[-1])
        return Week(start=dates[0], dates=dates, entries=list(entries))

    def weekly_view(self, week_start: date) -> dict:
        week = self.fetch_week(week_start)
        employees: Sequence[Employee] = self._employees.list_all()

        rows = []
        for emp in employees:
            cells = []
            for day in week.dates:
                entry = find_entry(week.entries, emp.display_name, day)
                cells.append({"date": day.isoformat(), "entry": entry.to_view() if entry else None})
            rows.append(
                {
                    "employee": emp.display_name,
                    "department": emp.department or None,
                    "initials": emp.initials,
                    "cells": cells,
                }
            )

        return {
            "view": "weekly",
            "week_start": week.start.isoformat(),
            "week_end": week.end.isoformat(),
            "days": [{"date": d.isoformat(), "label": d.strftime("%a")} for d in week.dates],
            "rows": rows,
        }

    def daily_view(self, week_start: date) -> dict:
        week = self.fetch_week(week_start)
        departments = {e.display_name: e.department for e in self._employees.list_all()}

        days = []
        for day in week.dates:
            grouped = group_by_department(week.entries, departments, day)
            days.append(
                {
                    "date": day.isoformat(),
                    "label": day.strftime("%A — %b %d, %Y"),
                    "empty": not any(grouped.values()),
                    "groups": [
                        {"department": dept, "entries": [e.to_view() for e in items]}
                        for dept, items in grouped.items()
                    ],
                }
            )

        return {
            "view": "daily",
            "week_start": week.start.isoformat(),
            "week_end": week.end.isoformat(),
            "days": days,
        }

    def _validate(self, form: ScheduleForm, *, is_editing: bool) -> date:
        require_fields(
            asdict(form),
            REQUIRED_FIELDS,
            "Employee, Date, Start Time, and End Time are required.",
        )
        if form.recurring and not form.until_date and not is_editing:
            raise ValidationError("Please provide an 'Until' date for recurring schedules.")

        try:
            start = parse_iso_date(form.date)
            parse_hhmm(form.start_time)
            parse_hhmm(form.end_time)
        except ValueError:
            raise ValidationError("Invalid date or time (YYYY-MM-DD, HH:MM)")
        return start

    def add(self, form: ScheduleForm) -> int:
        """Insert one entry, or one per week until the until date when recurring."""
        start = self._validate(form, is_editing=False)

        if form.recurring and form.until_date:
            try:
                until = parse_iso_date(form.until_date)
            except ValueError:
                raise ValidationError("Invalid 'Until' date (YYYY-MM-DD)")
            if occurrence_count(start, until) == 0:
                raise ValidationError("The 'Until' date must not be before the start date.")
            rows = [form.row_for(day, recurring=True) for day in expand_weekly(start, until)]
        else:
            rows = [form.row_for(start)]

        self._schedules.insert_many(rows)
        logger.info("Scheduled %d shift(s) for %s from %s", len(rows), form.employee_name, start)
        return len(rows)

    def edit(self, schedule_id: ScheduleId, form: ScheduleForm) -> None:
        """Update a single row; recurrence is not propagated to sibling rows."""
        start = self._validate(form, is_editing=True)
        if not self._schedules.update(schedule_id, form.row_for(start)):
            raise NotFoundError("Schedule not found")
        logger.info("Schedule %s updated", schedule_id)

    def edit_form(self, schedule_id: ScheduleId) -> ScheduleForm:
        entry = self._schedules.get_by_id(schedule_id)
        if not entry:
            raise NotFoundError("Schedule not found")
        return ScheduleForm.from_entry(entry)

    def delete(self, schedule_id: ScheduleId) -> None:
        if not self._schedules.delete(schedule_id):
            raise NotFoundError("Schedule not found")
        logger.info("Schedule %s deleted", schedule_id)

    @staticmethod
    def week_of(value: Optional[str], *, default: date) -> date:
        if not value:
            return week_start_for(default)
        try:
            return week_start_for(parse_iso_date(value))
        except ValueError:
            raise ValidationError("Invalid week (YYYY-MM-DD)")
