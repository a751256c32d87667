from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from province_portal.domain.identity import AuthenticatedUser
from province_portal.errors import NotFound, ValidationError
from province_portal.extensions import db
from province_portal.models.base import SQL_INT_MAX, utc_now
from province_portal.utils.audit import log_action
from province_portal.utils.pagination import PageMeta, page_args, paginate_query
from province_portal.utils.transaction import transactional

from .fields import parse_payload
from .resources import ContentResource


def parse_record_id(raw: Any) -> int:
    try:
        record_id = int(raw)
    except (TypeError, ValueError):
        record_id = 0

    if record_id <= 0 or record_id > SQL_INT_MAX:
        raise ValidationError("Invalid ID", field="id")
    return record_id


def list_records(
    resource: ContentResource,
    *,
    viewer: Optional[AuthenticatedUser],
    args,
    now: Optional[datetime] = None,
) -> Tuple[List[Any], Optional[PageMeta]]:
    now = now or utc_now()
    query = resource.visible_query(viewer, now)
    query = resource.ordered(resource.apply_filters(query, args))

    if not resource.paginated:
        return query.all(), None

    page, limit = page_args(args)
    return paginate_query(query, page=page, limit=limit)


def get_record(
    resource: ContentResource,
    *,
    viewer: Optional[AuthenticatedUser],
    args,
    now: Optional[datetime] = None,
):
    """Fetch one visible record by ``slug`` (slugged types) or ``id``."""
    now = now or utc_now()
    query = resource.visible_query(viewer, now)
    slug = (args.get("slug") or "").strip()

    if resource.slugged and slug:
        query = query.filter(resource.model.slug == slug)
    elif args.get("id"):
        query = query.filter(resource.model.id == parse_record_id(args.get("id")))
    else:
        raise ValidationError(
            "Slug is required" if resource.slugged else "ID is required",
            field="slug" if resource.slugged else "id",
        )

    entity = query.first()
    if entity is None:
        raise NotFound(f"{resource.label} not found")
    return entity


def create_record(
    resource: ContentResource,
    *,
    actor: AuthenticatedUser,
    data: Dict[str, Any],
    now: Optional[datetime] = None,
):
    """
    Create a record after coercing ``data`` through the resource fields.

    Edge cases handled:
    - Missing required fields (400 naming the field)
    - Duplicate slug or publication period (400 / 409 from the resource hook)
    """
    now = now or utc_now()
    values = parse_payload(resource.fields, data, partial=False)

    entity = resource.model()
    with transactional():
        with db.session.no_autoflush:
            resource.prepare(values, entity=None, now=now)

        for key, value in values.items():
            setattr(entity, key, value)

        db.session.add(entity)
        db.session.flush()  # ensures entity.id is available
        resource.after_save(entity, now=now)

        log_action(
            actor=actor,
            action=f"{resource.entity_type}.create",
            entity_type=resource.entity_type,
            entity_id=entity.id,
            payload={"fields": sorted(values)},
        )

    return entity


def update_record(
    resource: ContentResource,
    *,
    actor: AuthenticatedUser,
    record_id: int,
    data: Dict[str, Any],
    now: Optional[datetime] = None,
):
    """
    Partial update: only fields present in ``data`` are touched.

    Design rules:
    - A body without any known field is rejected
    - Resource hooks revalidate derived values (slug, period, publication)
    """
    now = now or utc_now()
    entity = resource.find(record_id)
    values = parse_payload(resource.fields, data, partial=True)

    if not values:
        raise ValidationError("No fields to update")

    changed_fields: list[str] = []
    with transactional():
        with db.session.no_autoflush:
            resource.prepare(values, entity=entity, now=now)

        for key, value in values.items():
            if getattr(entity, key) != value:
                setattr(entity, key, value)
                changed_fields.append(key)

        db.session.flush()
        resource.after_save(entity, now=now)

        log_action(
            actor=actor,
            action=f"{resource.entity_type}.update",
            entity_type=resource.entity_type,
            entity_id=entity.id,
            payload={"fields": changed_fields},
        )

    return entity


def delete_record(
    resource: ContentResource,
    *,
    actor: AuthenticatedUser,
    record_id: int,
    now: Optional[datetime] = None,
) -> None:
    now = now or utc_now()
    entity = resource.find(record_id)

    with transactional():
        entity.soft_delete(now)

        log_action(
            actor=actor,
            action=f"{resource.entity_type}.delete",
            entity_type=resource.entity_type,
            entity_id=entity.id,
        )
