"""Weekly recurrence expansion for schedule entries."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, List

from ..core.constants import RECURRENCE_STEP_DAYS


def iter_weekly(start: date, until: date) -> Iterator[date]:
    """Yield start, start+7d, start+14d, ... while not after until (inclusive)."""
    current = start
    step = timedelta(days=RECURRENCE_STEP_DAYS)
    while current <= until:
        yield current
        current += step


def expand_weekly(start: date, until: date) -> List[date]:
    return list(iter_weekly(start, until))


def occurrence_count(start: date, until: date) -> int:
    if until < start:
        return 0
    return (until - start).days // RECURRENCE_STEP_DAYS + 1
