from datetime import datetime
from typing import Optional


def publish_timestamp(
    *,
    is_published: bool,
    current: Optional[datetime],
    requested: Optional[datetime],
    now: datetime,
) -> Optional[datetime]:
    """
    Decide ``published_at`` after a write.

    An explicit timestamp always wins. Publishing without one stamps ``now``
    only the first time; an existing ``published_at`` is never overwritten.
    """
    if requested is not None:
        return requested

    if is_published and current is None:
        return now

    return current
