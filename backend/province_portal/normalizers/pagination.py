# province_portal/normalizers/pagination.py
from typing import Any, Callable, Dict, List, Optional

from province_portal.utils.pagination import CursorMeta, PageMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    page: Optional[PageMeta] = None,
    cursor: Optional[CursorMeta] = None,
) -> Dict[str, Any]:
    """
    Normalize list responses to ``{success, data, pagination?}``.

    At most ONE pagination strategy is used per response: offset metadata for
    content listings, cursor metadata for the audit log.
    """
    response: Dict[str, Any] = {
        "success": True,
        "data": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["pagination"] = {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
        }
    elif page is not None:
        response["pagination"] = dict(page)

    return response
