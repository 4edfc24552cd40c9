from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Form inputs arrive as '' when left empty; the database wants NULL."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_optional_id(value: Optional[str]) -> Optional[int]:
    value = (value or "").strip()
    if not value.isdigit():
        return None
    return int(value)
