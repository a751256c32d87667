from typing import Any, Dict

from flask import request

from province_portal.errors import ValidationError


def json_body() -> Dict[str, Any]:
    """The request's JSON object; an empty dict when there is no JSON body."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")
    return data
