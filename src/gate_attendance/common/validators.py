from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Please enter {field_name}")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def normalize_plate(value: Optional[str]) -> Optional[str]:
    """Upper-case and trim a plate number; blank means no vehicle."""
    if value is None:
        return None
    plate = value.strip().upper()
    return plate or None
