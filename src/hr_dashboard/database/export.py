"""Export the remote tables to local JSON files."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Sequence

from ..core.constants import (
    DEADLINES_TABLE,
    EMPLOYEES_TABLE,
    INTERNS_TABLE,
    SCHEDULES_TABLE,
    TIME_OFF_TABLE,
    TIMESHEET_TABLE,
)
from .connection import DataStoreConnection
from .remote_base import fetchall, remote_call

logger = logging.getLogger(__name__)

ALL_TABLES = (
    EMPLOYEES_TABLE,
    SCHEDULES_TABLE,
    TIMESHEET_TABLE,
    TIME_OFF_TABLE,
    INTERNS_TABLE,
    DEADLINES_TABLE,
)


def export_tables(
    conn: DataStoreConnection,
    out_dir: Path,
    *,
    tables: Sequence[str] = ALL_TABLES,
    now: Optional[datetime] = None,
) -> Dict[str, Path]:
    """Write one <table>_<timestamp>.json file per table; returns table -> path."""
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")

    written: Dict[str, Path] = {}
    for table in tables:
        with remote_call(table, "export"):
            res = conn.table(table).select("*").execute()
        rows = fetchall(res)
        path = out_dir / f"{table}_{ts}.json"
        path.write_text(json.dumps(rows, ensure_ascii=False, indent=2, default=str), encoding="utf-8")
        logger.info("Exported %d row(s) from %s to %s", len(rows), table, path)
        written[table] = path
    return written
