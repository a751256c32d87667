"""
Declarative description of each content type and its type-specific rules.

A ``ContentResource`` knows its model, request fields, public visibility,
ordering and list filters. Subclasses hook into ``prepare`` (derive and
validate values before they touch the row) and ``after_save`` (side effects
on sibling rows once the row has an id).
"""
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func

from province_portal.domain.archive import group_archive
from province_portal.domain.identity import AuthenticatedUser
from province_portal.domain.invariants.publication import assert_publication_period
from province_portal.domain.lifecycle.news import publish_timestamp
from province_portal.domain.navigation import resolve_menu
from province_portal.errors import Conflict, NotFound, ValidationError
from province_portal.extensions import db
from province_portal.normalizers.menu import normalize_menu_entry
from province_portal.normalizers.record import normalize_record
from province_portal.utils.slug import slug_taken, slugify, unique_slug

from .fields import Field


class ContentResource:
    def __init__(
        self,
        name: str,
        model,
        *,
        label: str,
        fields: Iterable[Field],
        ordering: Callable[[Any], Tuple[Any, ...]],
        entity_type: Optional[str] = None,
        public_flag: Optional[str] = "is_active",
        filters: Iterable[Field] = (),
        paginated: bool = False,
        media_fields: Iterable[str] = (),
        slugged: bool = False,
    ):
        self.name = name
        self.model = model
        self.label = label
        self.fields = tuple(fields)
        self.ordering = ordering
        self.entity_type = entity_type or name
        self.public_flag = public_flag
        self.filters = tuple(filters)
        self.paginated = paginated
        self.media_fields = tuple(media_fields)
        self.slugged = slugged

    def __repr__(self):
        return f"<ContentResource {self.name}>"

    # -------------------------------------------------
    # Reads
    # -------------------------------------------------
    def public_criteria(self, now: datetime) -> List[Any]:
        if self.public_flag is None:
            return []
        return [getattr(self.model, self.public_flag).is_(True)]

    def visible_query(self, viewer: Optional[AuthenticatedUser], now: datetime):
        query = self.model.query
        if viewer is None or not viewer.is_admin:
            query = query.filter(*self.public_criteria(now))
        return query

    def apply_filters(self, query, args):
        for field in self.filters:
            raw = args.get(field.name)
            if raw is None or raw == "":
                continue
            value = field.coerce(raw)
            if value is not None:
                query = query.filter(getattr(self.model, field.column) == value)
        return query

    def ordered(self, query):
        return query.order_by(*self.ordering(self.model))

    def find(self, record_id: int):
        entity = self.model.query.filter(self.model.id == record_id).first()
        if entity is None:
            raise NotFound(f"{self.label} not found")
        return entity

    def list_extras(self, *, viewer: Optional[AuthenticatedUser], now: datetime) -> Dict[str, Any]:
        return {}

    def serialize(self, entity) -> Dict[str, Any]:
        return normalize_record(entity, media_fields=self.media_fields)

    # -------------------------------------------------
    # Writes
    # -------------------------------------------------
    def prepare(self, values: Dict[str, Any], *, entity, now: datetime) -> None:
        """Derive and validate ``values`` in place; ``entity`` is None on create."""

    def after_save(self, entity, *, now: datetime) -> None:
        pass


def facet_counts(model, column, *criteria) -> List[Dict[str, Any]]:
    rows = (
        db.session.query(column, func.count(model.id))
        .filter(model.deleted_at.is_(None), column.isnot(None), column != "", *criteria)
        .group_by(column)
        .order_by(column.asc())
        .all()
    )
    return [{"value": value, "count": count} for value, count in rows]


class PageResource(ContentResource):
    DUPLICATE_SLUG = "A page with this slug already exists"

    def public_criteria(self, now):
        return [self.model.is_enabled.is_(True)]

    def prepare(self, values, *, entity, now):
        if entity is None:
            title = values["title"]
            values["meta_title"] = values.get("meta_title") or title
            values["menu_label"] = values.get("menu_label") or title

            if values.get("slug"):
                values["slug"] = self._explicit_slug(values["slug"], exclude_id=None)
            else:
                values["slug"] = unique_slug(self.model, title, fallback_prefix="page")
            return

        if "slug" in values:
            if values["slug"] is None:
                raise ValidationError("Slug cannot be empty", field="slug")
            if values["slug"] != entity.slug:
                values["slug"] = self._explicit_slug(values["slug"], exclude_id=entity.id)

    def _explicit_slug(self, raw: str, *, exclude_id: Optional[int]) -> str:
        slug = slugify(raw)
        if not slug:
            raise ValidationError("Slug must contain letters or numbers", field="slug")
        if slug_taken(self.model, slug, exclude_id=exclude_id):
            raise ValidationError(self.DUPLICATE_SLUG, field="slug")
        return slug

    def list_extras(self, *, viewer, now):
        pages = self.model.query.filter(
            self.model.is_enabled.is_(True),
            self.model.show_in_menu.is_(True),
        ).all()
        return {"menu_items": [normalize_menu_entry(e) for e in resolve_menu(pages)]}


class NewsResource(ContentResource):
    def public_criteria(self, now):
        return [
            self.model.is_published.is_(True),
            self.model.published_at.isnot(None),
            self.model.published_at <= now,
        ]

    def prepare(self, values, *, entity, now):
        if entity is None:
            values["slug"] = unique_slug(self.model, values["title"], fallback_prefix="news")
            values["published_at"] = publish_timestamp(
                is_published=bool(values.get("is_published")),
                current=None,
                requested=values.get("published_at"),
                now=now,
            )
            return

        if values.get("title") and values["title"] != entity.title:
            values["slug"] = unique_slug(
                self.model, values["title"], fallback_prefix="news", exclude_id=entity.id
            )

        if "is_published" in values or values.get("published_at") is not None:
            values["published_at"] = publish_timestamp(
                is_published=values.get("is_published", entity.is_published),
                current=entity.published_at,
                requested=values.get("published_at"),
                now=now,
            )
        else:
            values.pop("published_at", None)


class DatedPublicationResource(ContentResource):
    """Circulars and NewsLine issues: one live record per (year, month)."""

    def __init__(self, *args, duplicate_message: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.duplicate_message = duplicate_message

    def prepare(self, values, *, entity, now):
        if entity is not None and "month" not in values and "year" not in values:
            return

        month = values.get("month", entity.month if entity is not None else None)
        year = values.get("year", entity.year if entity is not None else None)
        assert_publication_period(month=month, year=year)

        query = self.model.query.filter(self.model.year == year, self.model.month == month)
        if entity is not None:
            query = query.filter(self.model.id != entity.id)
        if query.first() is not None:
            raise Conflict(self.duplicate_message)

    def archive(self) -> Dict[int, List[dict]]:
        model = self.model
        rows = (
            db.session.query(model.year, model.month, func.count(model.id))
            .filter(model.deleted_at.is_(None), model.is_active.is_(True))
            .group_by(model.year, model.month)
            .order_by(model.year.desc(), model.month.desc())
            .all()
        )
        return group_archive(rows)

    def list_extras(self, *, viewer, now):
        return {"archive": self.archive()}

    def current(self):
        return (
            self.model.query.filter(self.model.is_active.is_(True))
            .order_by(self.model.year.desc(), self.model.month.desc())
            .first()
        )


class ExclusiveFlagResource(ContentResource):
    """
    Keeps ``flag`` set on at most one live row per ``scope`` value.

    Used for the current provincial per title and the active strenna per year.
    """

    def __init__(self, *args, flag: str, scope: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.flag = flag
        self.scope = scope

    def after_save(self, entity, *, now):
        if not getattr(entity, self.flag):
            return

        model = self.model
        siblings = model.query.filter(
            getattr(model, self.scope) == getattr(entity, self.scope),
            getattr(model, self.flag).is_(True),
            model.id != entity.id,
        ).all()
        for sibling in siblings:
            setattr(sibling, self.flag, False)


class CouncilResource(ContentResource):
    def list_extras(self, *, viewer, now):
        model = self.model
        return {
            "dimensions": facet_counts(model, model.dimension, model.is_active.is_(True)),
            "commissions": facet_counts(model, model.commission, model.is_active.is_(True)),
        }


class GalleryResource(ContentResource):
    def categories(self) -> List[Dict[str, Any]]:
        return facet_counts(self.model, self.model.category)

    def list_extras(self, *, viewer, now):
        return {"categories": self.categories()}


class MessageResource(ContentResource):
    DEFAULT_AUTHOR_TITLE = "Provincial"

    def prepare(self, values, *, entity, now):
        if entity is not None:
            return

        parts = [part.strip() for part in values["title"].split(",") if part.strip()]
        if not values.get("author_name"):
            values["author_name"] = parts[0] if parts else self.DEFAULT_AUTHOR_TITLE
        if not values.get("author_title"):
            if self.DEFAULT_AUTHOR_TITLE.lower() in values["title"].lower():
                values["author_title"] = self.DEFAULT_AUTHOR_TITLE
            elif len(parts) > 1:
                values["author_title"] = parts[1]
