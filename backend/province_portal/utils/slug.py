import re
import time
import unicodedata
from typing import Callable, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: Optional[str]) -> str:
    """Lower-case ASCII alphanumerics separated by single hyphens."""
    ascii_text = (
        unicodedata.normalize("NFKD", text or "")
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    return _NON_ALNUM.sub("-", ascii_text.lower()).strip("-")


def slug_taken(model, slug: str, *, exclude_id: Optional[int] = None) -> bool:
    query = model.query.filter(model.slug == slug)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    return query.first() is not None


def unique_slug(
    model,
    source: Optional[str],
    *,
    fallback_prefix: str,
    exclude_id: Optional[int] = None,
    clock: Callable[[], float] = time.time,
) -> str:
    """
    Derive a slug from ``source`` that no live row of ``model`` uses.

    An empty derivation becomes ``<fallback_prefix>-<timestamp>``; a collision
    gets a ``-<timestamp>`` suffix (and a counter if that is taken too).
    """
    slug = slugify(source) or f"{fallback_prefix}-{int(clock())}"
    if not slug_taken(model, slug, exclude_id=exclude_id):
        return slug

    stamped = f"{slug}-{int(clock())}"
    candidate = stamped
    counter = 2
    while slug_taken(model, candidate, exclude_id=exclude_id):
        candidate = f"{stamped}-{counter}"
        counter += 1

    return candidate
