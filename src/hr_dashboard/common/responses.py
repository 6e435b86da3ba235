from __future__ import annotations

import logging
from typing import Any

from flask import jsonify, request

from ..core.exceptions import DataStoreError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, *, message: str = "", status: int = 200):
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    return jsonify(body), status


def fail(exc: DomainError):
    """Map a domain error to the JSON body the dashboard shows as an alert."""
    if isinstance(exc, ValidationError):
        status = 400
    elif isinstance(exc, NotFoundError):
        status = 404
    elif isinstance(exc, DataStoreError):
        status = 502
    else:
        status = 400
    logger.info("%s %s -> %s: %s", request.method, request.path, status, exc)
    return jsonify({"success": False, "message": str(exc)}), status


def form_data() -> dict:
    """JSON body, or form fields for plain HTML form posts."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()
