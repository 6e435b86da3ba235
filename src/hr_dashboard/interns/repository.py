from __future__ import annotations

from typing import Protocol, Sequence

from .model import DeadlineId, Intern


class InternRepository(Protocol):
    def list_with_deadlines(self) -> Sequence[Intern]:
        """Interns with their deadlines and each deadline's assignee."""

        raise NotImplementedError

    def exists(self, intern_id) -> bool:
        raise NotImplementedError

    def create(self, payload: dict) -> None:
        raise NotImplementedError

    def add_deadline(self, payload: dict) -> None:
        raise NotImplementedError

    def mark_deadline_done(self, deadline_id: DeadlineId) -> bool:
        raise NotImplementedError
