from datetime import date
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple
from flask import request, jsonify
from marshmallow import ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data when the body is not JSON
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls, data: Dict[str, Any], partial: bool = False) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """Load ``data`` through a marshmallow schema, returning ``(data, errors)``."""
    try:
        return schema_cls().load(data, partial=partial), None
    except ValidationError as e:
        return None, e.messages


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def arg_date(name: str) -> Optional[date]:
    """Parse a YYYY-MM-DD query argument. Raises ValueError on a malformed value."""
    val = (request.args.get(name) or "").strip()
    if not val:
        return None
    return date.fromisoformat(val)


def num(value: Any) -> Optional[float]:
    """Numeric columns come back as Decimal; the API speaks floats."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return float(value)
    return value


def service_error(e):
    """Response for a ``ServiceError`` raised by the service layer."""
    return error(e.code, e.message, e.status)
