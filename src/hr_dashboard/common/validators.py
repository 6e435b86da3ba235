from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_fields(form: Mapping[str, Any], keys: Iterable[str], message: str) -> None:
    """Reject the whole form when any required field is blank."""
    if any(not str(form.get(key) or "").strip() for key in keys):
        raise ValidationError(message)


def optional_str(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def as_bool(value: Any) -> bool:
    """Checkbox values arrive as JSON booleans or as form strings."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)
