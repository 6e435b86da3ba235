"""Constants and defaults.

Note: Keep table names and defaults here to avoid magic strings spread across code.
"""

EMPLOYEES_TABLE = "employees"
SCHEDULES_TABLE = "schedules"
TIMESHEET_TABLE = "timesheet"
TIME_OFF_TABLE = "time_off_requests"
INTERNS_TABLE = "stagiaires"
DEADLINES_TABLE = "echeances"

# Monday..Saturday
WORKING_DAYS = 6
RECURRENCE_STEP_DAYS = 7

UNKNOWN_DEPARTMENT = "Unknown"
RECENT_ACTIVITY_LIMIT = 4
