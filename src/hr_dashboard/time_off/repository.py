from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TimeOffStatus
from .model import RequestId, TimeOffRequest


class TimeOffRepository(Protocol):
    def list_recent(self, *, limit: Optional[int] = None) -> Sequence[TimeOffRequest]:
        """Requests joined with the employee name, newest first."""

        raise NotImplementedError

    def get_by_id(self, request_id: RequestId) -> Optional[TimeOffRequest]:
        raise NotImplementedError

    def create(self, payload: dict) -> None:
        raise NotImplementedError

    def set_status(self, request_id: RequestId, status: TimeOffStatus) -> bool:
        raise NotImplementedError

    def count_by_status(self, status: TimeOffStatus) -> int:
        raise NotImplementedError
