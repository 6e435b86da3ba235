from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import httpx
from postgrest.exceptions import APIError

from ..core.exceptions import DataStoreError

logger = logging.getLogger(__name__)


@contextmanager
def remote_call(table: str, action: str) -> Iterator[None]:
    """Translate data platform failures into DataStoreError.

    There is no retry: the failure is logged and surfaced to the caller.
    """
    try:
        yield
    except APIError as exc:
        logger.error("%s on %s failed: %s", action, table, exc.message)
        raise DataStoreError(f"{action.capitalize()} failed: {exc.message}") from exc
    except httpx.HTTPError as exc:
        logger.error("%s on %s failed: %s", action, table, exc)
        raise DataStoreError(f"{action.capitalize()} failed: {exc}") from exc


def fetchall(response: Any) -> List[Dict[str, Any]]:
    return list(getattr(response, "data", None) or [])


def fetchone(response: Any) -> Optional[Dict[str, Any]]:
    rows = fetchall(response)
    return rows[0] if rows else None


def count_of(response: Any) -> int:
    return int(getattr(response, "count", None) or 0)
