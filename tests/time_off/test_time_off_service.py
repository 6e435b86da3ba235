from datetime import date

import pytest

from hr_dashboard.core.enums import TimeOffStatus
from hr_dashboard.core.exceptions import NotFoundError, ValidationError
from hr_dashboard.time_off.model import TimeOffForm, TimeOffRequest
from hr_dashboard.time_off.service import TimeOffService


def _form(**overrides) -> TimeOffForm:
    data = {"employee_id": "3", "type": "Personal", "start_date": "2025-03-03", "end_date": "2025-03-04"}
    data.update(overrides)
    return TimeOffForm.from_mapping(data)


def test_list_is_newest_first(time_off):
    assert [r.id for r in TimeOffService(time_off).list()] == [2, 1]


@pytest.mark.parametrize("status_filter,expected", [("pending", [1]), ("approved", [2]), ("rejected", [])])
def test_list_filters_by_status(time_off, status_filter, expected):
    assert [r.id for r in TimeOffService(time_off).list(status_filter=status_filter)] == expected


def test_unknown_filter_rejected(time_off):
    with pytest.raises(ValidationError):
        TimeOffService(time_off).list(status_filter="archived")


@pytest.mark.parametrize("missing", ["employee_id", "type", "start_date", "end_date"])
def test_submit_requires_all_fields(time_off, missing):
    with pytest.raises(ValidationError, match="All fields required"):
        TimeOffService(time_off).submit(_form(**{missing: ""}))
    assert time_off.created == []


def test_submit_inserts_pending_request(time_off):
    TimeOffService(time_off).submit(_form(reason="Moving"))
    assert time_off.created == [
        {
            "employee_id": 3,
            "start_date": "2025-03-03",
            "end_date": "2025-03-04",
            "reason": "Moving",
            "type": "Personal",
            "status": "pending",
        }
    ]


def test_submit_rejects_reversed_dates_and_unknown_type(time_off):
    svc = TimeOffService(time_off)
    with pytest.raises(ValidationError):
        svc.submit(_form(start_date="2025-03-05", end_date="2025-03-04"))
    with pytest.raises(ValidationError, match="Unknown request type"):
        svc.submit(_form(type="Sabbatical"))


def test_approve_and_reject_only_pending(time_off):
    svc = TimeOffService(time_off)
    svc.approve(1)
    assert time_off.get_by_id(1).status is TimeOffStatus.APPROVED
    with pytest.raises(ValidationError, match="already been processed"):
        svc.reject(1)
    with pytest.raises(NotFoundError):
        svc.approve(99)


def test_pending_count_and_recent(time_off):
    svc = TimeOffService(time_off)
    assert svc.pending_count() == 1
    assert [r.id for r in svc.recent(1)] == [2]


def test_from_row_uses_joined_name_and_counts_days_inclusively():
    req = TimeOffRequest.from_row(
        {
            "id": 5,
            "employee_id": 1,
            "start_date": "2025-02-15",
            "end_date": "2025-02-22",
            "type": "Holiday",
            "status": "approved",
            "created_at": "2025-01-10T08:00:00Z",
            "employees": {"name": "Sarah Johnson"},
        }
    )
    assert req.employee_name == "Sarah Johnson"
    assert req.days == 8
    assert req.period == "2025-02-15 - 2025-02-22"
    assert req.created_at.year == 2025


def test_from_row_without_join_falls_back_to_unknown():
    req = TimeOffRequest.from_row(
        {"id": 6, "start_date": "2025-02-15", "end_date": "2025-02-15", "type": "Personal", "employees": None}
    )
    assert req.employee_name == "Unknown"
    assert req.status is TimeOffStatus.PENDING
    assert req.days == 1
    assert req.start_date == date(2025, 2, 15)
