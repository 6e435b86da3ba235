"""HR Dashboard package.

Organized by feature modules (employees, schedules, timesheets, time_off,
interns, dashboard), each with a thin Flask controller on top of a
service/repository pair. Persistence is delegated to a hosted data platform.
"""
