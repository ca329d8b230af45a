from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Trim free text; empty strings become None."""
    if value is None:
        return None
    v = str(value).strip()
    return v or None


def require_id_list(values, field_name: str) -> list[str]:
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list")
    out = [str(v).strip() for v in values if v is not None and str(v).strip()]
    return out
