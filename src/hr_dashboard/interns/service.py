from __future__ import annotations

import logging
from datetime import date
from typing import List, Sequence, Tuple

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import LaiArticle
from ..core.exceptions import NotFoundError, ValidationError
from .model import Deadline, DeadlineForm, DeadlineId, Intern, InternForm, InternId
from .repository import InternRepository

logger = logging.getLogger(__name__)


class InternService:
    """Interns (stagiaires) and their compliance deadlines (échéances)."""

    def __init__(self, interns: InternRepository):
        self._interns = interns

    def list(self) -> Sequence[Intern]:
        return list(self._interns.list_with_deadlines())

    def create(self, form: InternForm) -> Sequence[Intern]:
        first_name = require_non_empty(form.first_name, "First name")
        last_name = require_non_empty(form.last_name, "Last name")

        if form.lai_article:
            try:
                LaiArticle(form.lai_article)
            except ValueError:
                raise ValidationError(f"Unknown article: {form.lai_article}")

        try:
            rate = int(form.rate)
        except ValueError:
            raise ValidationError("Rate must be a whole number")
        if not 0 <= rate <= 100:
            raise ValidationError("Rate must be between 0 and 100")

        self._interns.create(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": form.email,
                "lai_article": form.lai_article,
                "rate": rate,
            }
        )
        logger.info("Intern added: %s %s", first_name, last_name)
        return self.list()

    def add_deadline(self, intern_id: InternId, form: DeadlineForm) -> Sequence[Intern]:
        if not form.title or not form.date:
            raise ValidationError("Title and date are required")
        try:
            deadline = parse_iso_date(form.date)
        except ValueError:
            raise ValidationError("Invalid date (YYYY-MM-DD)")
        if not self._interns.exists(intern_id):
            raise NotFoundError("Intern not found")

        assignee = form.assigned_to
        self._interns.add_deadline(
            {
                "stagiaire_id": intern_id,
                "mesure_id": None,
                "title": form.title,
                "deadline": deadline.isoformat(),
                "description": form.comment,
                "employee_id": (int(assignee) if assignee.isdigit() else assignee) or None,
                "is_done": False,
            }
        )
        logger.info("Deadline '%s' added for intern %s", form.title, intern_id)
        return self.list()

    def complete_deadline(self, deadline_id: DeadlineId) -> Sequence[Intern]:
        if not self._interns.mark_deadline_done(deadline_id):
            raise NotFoundError("Deadline not found")
        return self.list()

    def overdue(self, today: date) -> List[Tuple[Intern, Deadline]]:
        out = []
        for intern in self.list():
            for d in intern.deadlines:
                if d.is_overdue(today):
                    out.append((intern, d))
        out.sort(key=lambda pair: pair[1].deadline)
        return out
