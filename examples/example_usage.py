"""Example: use the service layer without Flask.

Controllers are a thin layer; the use cases live in the services.
"""

import importlib
from datetime import date

from dotenv import load_dotenv

from config import get_settings_module

from hr_dashboard.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_config=settings.SUPABASE_CONFIG)

    daily = container.schedule_service.daily_view(date.today())
    for day in daily["days"]:
        print(day["label"])
        for group in day["groups"]:
            names = ", ".join(e["employee_name"] for e in group["entries"])
            print(f"  {group['department']}: {names}")


if __name__ == "__main__":
    main()
