from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Sequence

from ..core.exceptions import ValidationError


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def require_non_empty(value: Any, field_name: str) -> str:
    text = _as_text(value)
    if not text.strip():
        raise ValidationError(f"{field_name} is required", {field_name: "required"})
    return text.strip()


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    text = _as_text(value)
    if len(text) < min_len:
        raise ValidationError(
            f"{field_name} must be at least {min_len} characters long",
            {field_name: f"min_length:{min_len}"},
        )
    return text


def require_pattern(value: str, field_name: str, pattern: str, message: str) -> str:
    if not re.fullmatch(pattern, value):
        raise ValidationError(message, {field_name: "invalid"})
    return value


def require_fields(data: Mapping[str, Any], field_names: Sequence[str]) -> dict[str, str]:
    """Collect every missing field before failing.

    Returns the stripped values for all ``field_names``.
    """
    cleaned: dict[str, str] = {}
    missing: list[str] = []
    for name in field_names:
        text = _as_text(data.get(name)).strip()
        if not text:
            missing.append(name)
        cleaned[name] = text
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            {name: "required" for name in missing},
        )
    return cleaned


def optional_text(value: Any) -> Optional[str]:
    text = _as_text(value).strip()
    return text or None
