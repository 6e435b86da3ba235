from __future__ import annotations

from datetime import date, datetime
from dataclasses import replace
from typing import Any, Optional

import pytest

from hr_dashboard.container import assemble
from hr_dashboard.core.enums import TimeOffStatus
from hr_dashboard.employees.model import Employee
from hr_dashboard.interns.model import Intern
from hr_dashboard.schedules.model import ScheduleEntry
from hr_dashboard.time_off.model import TimeOffRequest
from hr_dashboard.timesheets.model import TimesheetEntry


# ---------------------------------------------------------------------------
# Recording stand-in for the data platform client (table().select()...execute())
# ---------------------------------------------------------------------------
class FakeResponse:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    def __init__(self, store: "FakeDataStore", table: str):
        self._store = store
        self.table = table
        self.calls: list[tuple[str, tuple, dict]] = []

    def __getattr__(self, name: str):
        # select/insert/update/delete/eq/gte/lte/order/limit all chain.
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self

        return method

    def execute(self):
        if self._store.error is not None:
            raise self._store.error
        return self._store.responses.get(self.table, FakeResponse([]))

    def called(self, name: str) -> list[tuple[tuple, dict]]:
        return [(args, kwargs) for n, args, kwargs in self.calls if n == name]


class FakeDataStore:
    def __init__(self):
        self.queries: list[FakeQuery] = []
        self.responses: dict[str, FakeResponse] = {}
        self.error: Optional[Exception] = None

    def respond(self, table: str, data=None, count=None) -> None:
        self.responses[table] = FakeResponse(data, count)

    def table(self, name: str) -> FakeQuery:
        q = FakeQuery(self, name)
        self.queries.append(q)
        return q

    @property
    def last(self) -> FakeQuery:
        return self.queries[-1]


@pytest.fixture
def store() -> FakeDataStore:
    return FakeDataStore()


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------
class InMemoryEmployees:
    def __init__(self, employees=()):
        self.items: list[Employee] = list(employees)
        self._next_id = 100

    def list_all(self):
        return list(self.items)

    def get_by_id(self, employee_id):
        return next((e for e in self.items if str(e.id) == str(employee_id)), None)

    def create(self, payload: dict) -> None:
        self._next_id += 1
        self.items.append(Employee.from_row({"id": self._next_id, **payload}))

    def update(self, employee_id, payload: dict) -> bool:
        for i, e in enumerate(self.items):
            if str(e.id) == str(employee_id):
                self.items[i] = Employee.from_row({"id": e.id, "name": e.name, **payload})
                return True
        return False

    def delete(self, employee_id) -> bool:
        before = len(self.items)
        self.items = [e for e in self.items if str(e.id) != str(employee_id)]
        return len(self.items) < before

    def count(self) -> int:
        return len(self.items)


class InMemorySchedules:
    def __init__(self, entries=()):
        self.items: list[ScheduleEntry] = list(entries)
        self.inserted: list[list[dict]] = []
        self._next_id = 1000

    def list_range(self, *, start: date, end: date):
        return sorted((e for e in self.items if start <= e.date <= end), key=lambda e: e.date)

    def get_by_id(self, schedule_id):
        return next((e for e in self.items if str(e.id) == str(schedule_id)), None)

    def insert_many(self, rows) -> int:
        rows = list(rows)
        self.inserted.append(rows)
        for row in rows:
            self._next_id += 1
            self.items.append(ScheduleEntry.from_row({"id": self._next_id, **row}))
        return len(rows)

    def update(self, schedule_id, row: dict) -> bool:
        for i, e in enumerate(self.items):
            if str(e.id) == str(schedule_id):
                self.items[i] = ScheduleEntry.from_row({"id": e.id, **row})
                return True
        return False

    def delete(self, schedule_id) -> bool:
        before = len(self.items)
        self.items = [e for e in self.items if str(e.id) != str(schedule_id)]
        return len(self.items) < before


class InMemoryTimesheets:
    def __init__(self, entries=()):
        self.items: list[TimesheetEntry] = list(entries)
        self.created: list[dict] = []

    def list_all(self):
        return list(self.items)

    def list_range(self, *, start: date, end: date):
        return [e for e in self.items if start <= e.work_date <= end]

    def create(self, payload: dict) -> None:
        self.created.append(payload)
        self.items.append(TimesheetEntry.from_row({"id": len(self.items) + 1, **payload}))

    def delete(self, entry_id) -> bool:
        before = len(self.items)
        self.items = [e for e in self.items if str(e.id) != str(entry_id)]
        return len(self.items) < before


class InMemoryTimeOff:
    def __init__(self, requests=()):
        self.items: list[TimeOffRequest] = list(requests)
        self.created: list[dict] = []

    def list_recent(self, *, limit=None):
        items = sorted(self.items, key=lambda r: r.created_at or datetime.min, reverse=True)
        return items[:limit] if limit is not None else items

    def get_by_id(self, request_id):
        return next((r for r in self.items if str(r.id) == str(request_id)), None)

    def create(self, payload: dict) -> None:
        self.created.append(payload)
        self.items.append(
            TimeOffRequest.from_row(
                {"id": len(self.items) + 1, "created_at": "2025-01-10T09:00:00", **payload}
            )
        )

    def set_status(self, request_id, status: TimeOffStatus) -> bool:
        for i, r in enumerate(self.items):
            if str(r.id) == str(request_id) and r.status == TimeOffStatus.PENDING:
                self.items[i] = replace(r, status=status)
                return True
        return False

    def count_by_status(self, status: TimeOffStatus) -> int:
        return sum(1 for r in self.items if r.status == status)


class InMemoryInterns:
    def __init__(self, rows=()):
        self.rows: list[dict[str, Any]] = [dict(r) for r in rows]
        self.deadlines: list[dict[str, Any]] = []

    def list_with_deadlines(self):
        out = []
        for r in self.rows:
            echeances = [d for d in self.deadlines if str(d["stagiaire_id"]) == str(r["id"])]
            out.append(Intern.from_row({**r, "echeances": echeances}))
        return out

    def exists(self, intern_id) -> bool:
        return any(str(r["id"]) == str(intern_id) for r in self.rows)

    def create(self, payload: dict) -> None:
        self.rows.append({"id": len(self.rows) + 1, **payload})

    def add_deadline(self, payload: dict) -> None:
        self.deadlines.append({"id": len(self.deadlines) + 1, **payload})

    def mark_deadline_done(self, deadline_id) -> bool:
        for d in self.deadlines:
            if str(d["id"]) == str(deadline_id):
                d["is_done"] = True
                return True
        return False


def make_entry(id_, name, day, *, morning=True, afternoon=False, recurring=False) -> ScheduleEntry:
    return ScheduleEntry(
        id=id_,
        employee_name=name,
        date=day,
        start_time="08:00:00",
        end_time="12:00:00",
        morning=morning,
        afternoon=afternoon,
        recurring=recurring,
    )


@pytest.fixture
def employees() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(id=1, name="Sarah Johnson", department="Kitchen", email="sarah@example.com"),
            Employee(id=2, name="Mike Chen", department="Service", status="on-leave"),
            Employee(id=3, name="Emma Davis", department=""),
        ]
    )


@pytest.fixture
def schedules() -> InMemorySchedules:
    return InMemorySchedules(
        [
            make_entry(1, "Sarah Johnson", date(2025, 1, 6), morning=True, afternoon=True),
            make_entry(2, "Mike Chen", date(2025, 1, 6), morning=False, afternoon=True),
            make_entry(3, "Emma Davis", date(2025, 1, 7)),
            make_entry(4, "Ghost Worker", date(2025, 1, 7)),
            # Sunday and next Monday fall outside the Monday..Saturday window.
            make_entry(5, "Sarah Johnson", date(2025, 1, 12)),
            make_entry(6, "Sarah Johnson", date(2025, 1, 13)),
        ]
    )


@pytest.fixture
def timesheets() -> InMemoryTimesheets:
    return InMemoryTimesheets()


@pytest.fixture
def time_off() -> InMemoryTimeOff:
    return InMemoryTimeOff(
        [
            TimeOffRequest(
                id=1,
                employee_id=1,
                start_date=date(2025, 2, 15),
                end_date=date(2025, 2, 22),
                type="Holiday",
                status=TimeOffStatus.PENDING,
                reason="Family vacation",
                employee_name="Sarah Johnson",
                created_at=datetime(2025, 1, 10, 8, 0),
            ),
            TimeOffRequest(
                id=2,
                employee_id=2,
                start_date=date(2025, 1, 20),
                end_date=date(2025, 1, 20),
                type="Sick Leave",
                status=TimeOffStatus.APPROVED,
                employee_name="Mike Chen",
                created_at=datetime(2025, 1, 18, 8, 0),
            ),
        ]
    )


@pytest.fixture
def interns() -> InMemoryInterns:
    return InMemoryInterns(
        [{"id": 1, "first_name": "Lea", "last_name": "Muller", "email": "lea@example.com", "lai_article": "14LAI", "rate": 50}]
    )


@pytest.fixture
def container(employees, schedules, timesheets, time_off, interns):
    return assemble(
        conn=None,
        employees_repo=employees,
        schedules_repo=schedules,
        timesheets_repo=timesheets,
        time_off_repo=time_off,
        interns_repo=interns,
    )


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from hr_dashboard.main import create_app

    app = create_app(container)
    return app.test_client()
