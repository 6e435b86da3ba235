from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Sequence

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError, ValidationError
from .model import WINDOW_FIELDS, TimesheetEntry, TimesheetForm, TimesheetId
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class TimesheetService:
    def __init__(self, timesheets: TimesheetRepository):
        self._timesheets = timesheets

    def list(self) -> Sequence[TimesheetEntry]:
        return list(self._timesheets.list_all())

    def _validate(self, form: TimesheetForm) -> None:
        require_fields(asdict(form), ("employee_id", "work_date"), "Employee and date are required")
        try:
            parse_iso_date(form.work_date)
        except ValueError:
            raise ValidationError("Invalid date (YYYY-MM-DD)")

        values = asdict(form)
        for label, start_key, end_key in WINDOW_FIELDS:
            if label == "evening" and not form.has_evening:
                continue
            try:
                start = parse_hhmm(values[start_key]) if values[start_key] else None
                end = parse_hhmm(values[end_key]) if values[end_key] else None
            except ValueError:
                raise ValidationError(f"Invalid {label} time (HH:MM)")
            if start and end and end < start:
                raise ValidationError(f"{label.capitalize()} end cannot be before its start")

    def add(self, form: TimesheetForm) -> Sequence[TimesheetEntry]:
        self._validate(form)
        self._timesheets.create(form.to_payload())
        logger.info("Timesheet added for employee %s on %s", form.employee_id, form.work_date)
        return self.list()

    def delete(self, entry_id: TimesheetId) -> Sequence[TimesheetEntry]:
        if not self._timesheets.delete(entry_id):
            raise NotFoundError("Timesheet entry not found")
        return self.list()

    def minutes_between(self, start: date, end: date) -> int:
        """Total worked minutes logged with start <= work_date <= end."""
        return sum(e.worked_minutes for e in self._timesheets.list_range(start=start, end=end))
