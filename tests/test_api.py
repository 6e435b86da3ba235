from hr_dashboard.core.exceptions import DataStoreError
from hr_dashboard.employees.model import Employee


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "data": {"status": "ok"}}


def test_dashboard(client):
    body = client.get("/api/dashboard").get_json()
    assert body["success"] is True
    assert body["data"]["total_employees"] == 3
    assert body["data"]["pending_requests"] == 1
    assert len(body["data"]["recent_activity"]) == 2


def test_schedules_weekly_view_with_navigation(client):
    body = client.get("/api/schedules?week=2025-01-08").get_json()
    data = body["data"]
    assert data["view"] == "weekly"
    assert data["week_start"] == "2025-01-06"
    assert data["week_end"] == "2025-01-11"
    assert data["previous_week"] == "2024-12-30"
    assert data["next_week"] == "2025-01-13"
    assert [r["employee"] for r in data["rows"]] == ["Sarah Johnson", "Mike Chen", "Emma Davis"]


def test_schedules_daily_view(client):
    data = client.get("/api/schedules?week=2025-01-06&view=daily").get_json()["data"]
    assert data["days"][1]["groups"][0]["department"] == "Unknown"
    assert data["days"][5]["empty"] is True


def test_schedules_unknown_view_is_rejected(client):
    resp = client.get("/api/schedules?week=2025-01-06&view=monthly")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_schedules_add_recurring(client, schedules):
    resp = client.post(
        "/api/schedules?week=2025-01-06",
        json={
            "employee_name": "Emma Davis",
            "date": "2025-01-08",
            "start_time": "13:00",
            "end_time": "17:00",
            "afternoon": True,
            "recurring": True,
            "until_date": "2025-01-29",
        },
    )
    assert resp.status_code == 201
    assert resp.get_json()["message"] == "4 shift(s) saved"
    assert len(schedules.inserted[0]) == 4


def test_schedules_add_missing_fields(client, schedules):
    resp = client.post("/api/schedules", json={"employee_name": "Emma Davis", "date": "2025-01-08"})
    assert resp.status_code == 400
    assert resp.get_json() == {
        "success": False,
        "message": "Employee, Date, Start Time, and End Time are required.",
    }
    assert schedules.inserted == []


def test_schedules_add_from_html_form(client, schedules):
    resp = client.post(
        "/api/schedules",
        data={"employee_name": "Mike Chen", "date": "2025-01-09", "start_time": "08:00", "end_time": "12:00", "morning": "on"},
    )
    assert resp.status_code == 201
    assert schedules.inserted[0][0]["morning"] is True


def test_schedules_edit_form_and_update(client, schedules):
    form = client.get("/api/schedules/2").get_json()["data"]
    assert form["start_time"] == "08:00"
    assert form["afternoon"] is True

    form["end_time"] = "18:00"
    resp = client.put("/api/schedules/2?week=2025-01-06", json=form)
    assert resp.status_code == 200
    assert schedules.get_by_id(2).end_time == "18:00"


def test_schedules_missing_row_is_404(client):
    assert client.get("/api/schedules/404").status_code == 404
    assert client.delete("/api/schedules/404").status_code == 404


def test_employees_search_and_add(client):
    data = client.get("/api/employees?search=service").get_json()["data"]
    assert [e["display_name"] for e in data] == ["Mike Chen"]

    resp = client.post("/api/employees", json={"first_name": "Nora", "last_name": "Keller"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Names and Email are required"

    resp = client.post(
        "/api/employees", json={"first_name": "Nora", "last_name": "Keller", "email": "nora@example.com"}
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"][-1]["initials"] == "NK"


def test_employees_update_unknown_is_404(client):
    assert client.put("/api/employees/99", json={"first_name": "X"}).status_code == 404


def test_timesheets_add_and_list(client):
    resp = client.post(
        "/api/timesheets",
        json={"employee_id": "1", "work_date": "2025-01-06", "morning_start": "08:00", "morning_end": "12:00"},
    )
    assert resp.status_code == 201
    entries = client.get("/api/timesheets").get_json()["data"]
    assert entries[0]["worked_minutes"] == 240

    resp = client.post("/api/timesheets", json={"work_date": "2025-01-06"})
    assert resp.get_json()["message"] == "Employee and date are required"


def test_time_off_filter_submit_and_decide(client):
    data = client.get("/api/time-off?status=pending").get_json()["data"]
    assert data["filter"] == "pending"
    assert [r["id"] for r in data["requests"]] == [1]

    resp = client.post(
        "/api/time-off",
        json={"employee_id": "3", "type": "Medical Appointment", "start_date": "2025-03-03", "end_date": "2025-03-03"},
    )
    assert resp.status_code == 201

    resp = client.post("/api/time-off/1/approve")
    assert resp.status_code == 200
    assert client.post("/api/time-off/1/reject").status_code == 400
    assert client.post("/api/time-off/2/approve").status_code == 400


def test_time_off_requires_all_fields(client):
    resp = client.post("/api/time-off", json={"employee_id": "3", "type": "Holiday"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "All fields required"


def test_interns_and_deadlines(client):
    resp = client.post("/api/interns/1/deadlines", json={"title": "Contract signed", "date": "2020-01-01"})
    assert resp.status_code == 201
    intern = resp.get_json()["data"][0]
    assert intern["deadlines"][0]["title"] == "Contract signed"

    overdue = client.get("/api/deadlines/overdue").get_json()["data"]
    assert [(d["intern"], d["title"]) for d in overdue] == [("Lea Muller", "Contract signed")]

    assert client.post("/api/deadlines/1/done").status_code == 200
    assert client.get("/api/deadlines/overdue").get_json()["data"] == []
    assert client.post("/api/interns/5/deadlines", json={"title": "X", "date": "2025-01-01"}).status_code == 404


def test_interns_create_validates_rate(client):
    resp = client.post("/api/interns", json={"first_name": "Tom", "last_name": "Keller", "rate": "150"})
    assert resp.status_code == 400
    resp = client.post("/api/interns", json={"first_name": "Tom", "last_name": "Keller", "lai_article": "14LAI", "rate": 40})
    assert resp.status_code == 201
    assert len(resp.get_json()["data"]) == 2


def test_platform_failure_is_bad_gateway(client, employees, monkeypatch):
    def down():
        raise DataStoreError("Fetch employees failed: down")

    monkeypatch.setattr(employees, "list_all", down)

    resp = client.get("/api/employees")
    assert resp.status_code == 502
    assert resp.get_json() == {"success": False, "message": "Fetch employees failed: down"}


def test_employees_partial_update_and_blanked_fields(client, employees):
    employees.items.append(
        Employee(id=10, first_name="Sarah", last_name="Johnson", email="s@x.io", status="on-leave")
    )

    resp = client.put("/api/employees/10", json={"position": "Chef"})
    assert resp.status_code == 200
    sarah = employees.get_by_id(10)
    assert (sarah.first_name, sarah.email, sarah.status) == ("Sarah", "s@x.io", "on-leave")
    assert sarah.position == "Chef"

    resp = client.put("/api/employees/10", json={"email": " "})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Names and Email are required"
    assert employees.get_by_id(10).email == "s@x.io"
