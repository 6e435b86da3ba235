"""Backup the hosted tables.

Note: The data platform has no dump tool reachable from here, so every table
is read through the client and written to backups/<table>_<timestamp>.json.
"""

from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from hr_dashboard.core.logging_config import setup_logging
from hr_dashboard.database.connection import DataStoreConfig, DataStoreConnection
from hr_dashboard.database.export import export_tables


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    data_config = settings.SUPABASE_CONFIG
    conn = DataStoreConnection.get_instance(
        DataStoreConfig(url=data_config.get("url", ""), anon_key=data_config.get("anon_key", ""))
    )

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    written = export_tables(conn, out_dir)
    print(f"OK: Backup created: {len(written)} table(s) in {out_dir}")


if __name__ == "__main__":
    main()
