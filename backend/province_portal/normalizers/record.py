from datetime import date, datetime
from typing import Any, Dict, Iterable

from sqlalchemy import inspect

from province_portal.utils.media import media_url

HIDDEN_COLUMNS = {"deleted_at"}


def normalize_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


def normalize_record(entity, media_fields: Iterable[str] = ()) -> Dict[str, Any]:
    """Column-by-column JSON view of a content row."""
    media = set(media_fields)
    data: Dict[str, Any] = {}

    for column in inspect(entity).mapper.column_attrs:
        if column.key in HIDDEN_COLUMNS:
            continue
        value = normalize_value(getattr(entity, column.key))
        data[column.key] = media_url(value) if column.key in media else value

    return data
