from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_fields
from ..core.enums import TimeOffStatus, TimeOffType
from ..core.exceptions import NotFoundError, ValidationError
from .model import RequestId, TimeOffForm, TimeOffRequest
from .repository import TimeOffRepository

logger = logging.getLogger(__name__)

FILTERS = ("all",) + tuple(s.value for s in TimeOffStatus)


class TimeOffService:
    """Time-off requests: list/filter, submit, approve/reject."""

    def __init__(self, requests: TimeOffRepository):
        self._requests = requests

    def list(self, *, status_filter: str = "all") -> Sequence[TimeOffRequest]:
        if status_filter not in FILTERS:
            raise ValidationError(f"Unknown filter: {status_filter}")
        requests = self._requests.list_recent()
        if status_filter == "all":
            return list(requests)
        return [r for r in requests if r.status.value == status_filter]

    def submit(self, form: TimeOffForm) -> None:
        require_fields(asdict(form), ("employee_id", "type", "start_date", "end_date"), "All fields required")

        try:
            start = parse_iso_date(form.start_date)
            end = parse_iso_date(form.end_date)
        except ValueError:
            raise ValidationError("Invalid date (YYYY-MM-DD)")
        if end < start:
            raise ValidationError("End date must be on or after the start date")

        try:
            request_type = TimeOffType(form.type)
        except ValueError:
            raise ValidationError(f"Unknown request type: {form.type}")

        if not form.employee_id.isdigit():
            raise ValidationError("Invalid employee")

        self._requests.create(
            {
                "employee_id": int(form.employee_id),
                "start_date": start.isoformat(),
                "end_date": end.isoformat(),
                "reason": form.reason,
                "type": request_type.value,
                "status": TimeOffStatus.PENDING.value,
            }
        )
        logger.info("Time-off request submitted for employee %s (%s, %s..%s)", form.employee_id, request_type.value, start, end)

    def _decide(self, request_id: RequestId, status: TimeOffStatus) -> None:
        req = self._requests.get_by_id(request_id)
        if not req:
            raise NotFoundError("Request not found")
        if req.status != TimeOffStatus.PENDING:
            raise ValidationError("Request has already been processed")
        if not self._requests.set_status(request_id, status):
            raise ValidationError("Request has already been processed")
        logger.info("Time-off request %s %s", request_id, status.value)

    def approve(self, request_id: RequestId) -> None:
        self._decide(request_id, TimeOffStatus.APPROVED)

    def reject(self, request_id: RequestId) -> None:
        self._decide(request_id, TimeOffStatus.REJECTED)

    def pending_count(self) -> int:
        return self._requests.count_by_status(TimeOffStatus.PENDING)

    def recent(self, limit: int) -> Sequence[TimeOffRequest]:
        return list(self._requests.list_recent(limit=limit))
