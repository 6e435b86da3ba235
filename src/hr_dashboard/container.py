from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dashboard.service import DashboardService
from .database.connection import DataStoreConfig, DataStoreConnection
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .employees.supabase_employee_repository import SupabaseEmployeeRepository
from .interns.repository import InternRepository
from .interns.service import InternService
from .interns.supabase_intern_repository import SupabaseInternRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .schedules.supabase_schedule_repository import SupabaseScheduleRepository
from .time_off.repository import TimeOffRepository
from .time_off.service import TimeOffService
from .time_off.supabase_time_off_repository import SupabaseTimeOffRepository
from .timesheets.repository import TimesheetRepository
from .timesheets.service import TimesheetService
from .timesheets.supabase_timesheet_repository import SupabaseTimesheetRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DataStoreConnection]

    employees_repo: EmployeeRepository
    schedules_repo: ScheduleRepository
    timesheets_repo: TimesheetRepository
    time_off_repo: TimeOffRepository
    interns_repo: InternRepository

    employee_service: EmployeeService
    schedule_service: ScheduleService
    timesheet_service: TimesheetService
    time_off_service: TimeOffService
    intern_service: InternService
    dashboard_service: DashboardService


def assemble(
    *,
    conn: Optional[DataStoreConnection],
    employees_repo: EmployeeRepository,
    schedules_repo: ScheduleRepository,
    timesheets_repo: TimesheetRepository,
    time_off_repo: TimeOffRepository,
    interns_repo: InternRepository,
) -> Container:
    employee_service = EmployeeService(employees_repo)
    schedule_service = ScheduleService(schedules_repo, employees_repo)
    timesheet_service = TimesheetService(timesheets_repo)
    time_off_service = TimeOffService(time_off_repo)
    intern_service = InternService(interns_repo)
    dashboard_service = DashboardService(employees_repo, time_off_service, timesheet_service)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        schedules_repo=schedules_repo,
        timesheets_repo=timesheets_repo,
        time_off_repo=time_off_repo,
        interns_repo=interns_repo,
        employee_service=employee_service,
        schedule_service=schedule_service,
        timesheet_service=timesheet_service,
        time_off_service=time_off_service,
        intern_service=intern_service,
        dashboard_service=dashboard_service,
    )


def build_container(*, data_config: dict) -> Container:
    config = DataStoreConfig(
        url=str(data_config.get("url") or ""),
        anon_key=str(data_config.get("anon_key") or ""),
    )
    conn = DataStoreConnection.get_instance(config)

    return assemble(
        conn=conn,
        employees_repo=SupabaseEmployeeRepository(conn),
        schedules_repo=SupabaseScheduleRepository(conn),
        timesheets_repo=SupabaseTimesheetRepository(conn),
        time_off_repo=SupabaseTimeOffRepository(conn),
        interns_repo=SupabaseInternRepository(conn),
    )
