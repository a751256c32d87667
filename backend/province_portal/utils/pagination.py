# province_portal/utils/pagination.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Tuple, Type, TypedDict

from flask import current_app
from sqlalchemy.orm import Query
from sqlalchemy.sql import and_, or_
from werkzeug.exceptions import BadRequest

from province_portal.models.base import SQL_INT_MAX

# Keeps OFFSET within range for any page size.
MAX_PAGE_NUMBER = 1_000_000


class PageMeta(TypedDict):
    page: int
    limit: int
    total: int
    pages: int


class CursorMeta(TypedDict):
    has_more: bool
    next_cursor: Optional[str]


def page_args(args) -> Tuple[int, int]:
    """
    Read ``page`` and ``limit`` from query args.

    Out-of-range or non-numeric values are clamped rather than rejected:
    1 <= page <= MAX_PAGE_NUMBER, 1 <= limit <= MAX_PAGE_SIZE.
    """
    default_size = current_app.config["DEFAULT_PAGE_SIZE"]
    max_size = current_app.config["MAX_PAGE_SIZE"]

    page = args.get("page", 1, type=int)
    limit = args.get("limit", default_size, type=int)

    return min(MAX_PAGE_NUMBER, max(1, page)), min(max_size, max(1, limit))


def paginate_query(query: Query, *, page: int, limit: int) -> tuple[list[Any], PageMeta]:
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()

    return items, {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": (total + limit - 1) // limit,
    }


def encode_cursor(created_at: datetime, row_id: int) -> str:
    """Opaque-enough cursor of the form ``<ISO timestamp>|<id>``."""
    if not isinstance(created_at, datetime) or row_id is None:
        raise ValueError("created_at and row_id are required to encode cursor")

    return f"{created_at.isoformat()}|{row_id}"


def decode_cursor(cursor: str) -> Tuple[datetime, int]:
    if not cursor or "|" not in cursor:
        raise BadRequest("Invalid cursor format")

    try:
        ts_str, raw_id = cursor.split("|", 1)
        created_at, row_id = datetime.fromisoformat(ts_str), int(raw_id)
    except ValueError as exc:
        raise BadRequest("Invalid cursor format") from exc

    if not 0 < row_id <= SQL_INT_MAX:
        raise BadRequest("Invalid cursor format")
    return created_at, row_id


def apply_cursor(
    query: Query,
    *,
    model: Type[Any],
    cursor: Optional[str],
) -> Query:
    """Rows older than ``cursor`` under ORDER BY created_at DESC, id DESC."""
    if not cursor:
        return query

    cursor_ts, cursor_id = decode_cursor(cursor)

    return query.filter(
        or_(
            model.created_at < cursor_ts,
            and_(
                model.created_at == cursor_ts,
                model.id < cursor_id,
            ),
        )
    )


def paginate_cursor(
    query: Query,
    *,
    model: Type[Any],
    limit: int,
) -> tuple[list[Any], CursorMeta]:
    """Newest first; one extra row is fetched to tell whether another page exists."""
    if limit <= 0:
        raise BadRequest("Limit must be greater than zero")

    rows = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .limit(limit + 1)
        .all()
    )

    has_more = len(rows) > limit
    items = rows[:limit]

    next_cursor: Optional[str] = None
    if items and has_more:
        last = items[-1]
        next_cursor = encode_cursor(last.created_at, last.id)

    return items, {
        "has_more": has_more,
        "next_cursor": next_cursor,
    }
