from __future__ import annotations

from typing import Any, Dict, Optional

from flask import request

from ..core.exceptions import ValidationError


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def text_field(data: Dict[str, Any], name: str) -> str:
    value = data.get(name)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def query_arg(name: str) -> Optional[str]:
    value = request.args.get(name, "")
    return value or None
