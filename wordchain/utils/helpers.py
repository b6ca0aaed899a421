"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional
from flask import request


def get_json_body(request_obj=None) -> Dict[str, Any]:
    """Return the JSON body of a request, or an empty dict when absent or malformed."""
    if request_obj is None:
        request_obj = request

    data = request_obj.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def parse_flag(value: Any, default: bool) -> bool:
    """Interpret a JSON/form value as a boolean switch."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def optional_flag(data: Dict[str, Any], key: str) -> Optional[bool]:
    """Like parse_flag, but None when the key is absent so callers can fall back to config."""
    if key not in data or data[key] is None:
        return None
    return parse_flag(data[key], False)
