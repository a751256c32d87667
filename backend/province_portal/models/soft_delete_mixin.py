# province_portal/models/soft_delete_mixin.py
from typing import Optional
from datetime import datetime

from sqlalchemy import event
from sqlalchemy.orm import Session, with_loader_criteria

from province_portal.extensions import db
from .base import utc_now


class SoftDeleteMixin:
    deleted_at = db.Column(db.DateTime, nullable=True, index=True)

    def soft_delete(self, now: Optional[datetime] = None):
        self.deleted_at = now or utc_now()

    @property
    def is_deleted(self):
        return self.deleted_at is not None


@event.listens_for(Session, "do_orm_execute")
def _exclude_soft_deleted(execute_state):
    """
    Hide soft-deleted rows from every ORM SELECT, relationship loads included.

    Opt out per statement with ``.execution_options(include_deleted=True)``.
    """
    if (
        not execute_state.is_select
        or execute_state.is_column_load
        or execute_state.is_relationship_load
        or execute_state.execution_options.get("include_deleted", False)
    ):
        return

    execute_state.statement = execute_state.statement.options(
        with_loader_criteria(
            SoftDeleteMixin,
            lambda cls: cls.deleted_at.is_(None),
            include_aliases=True,
        )
    )


def live_unique_index(name: str, *columns: str):
    """Unique index over non-deleted rows; skipped on dialects without partial indexes."""
    return db.Index(
        name,
        *columns,
        unique=True,
        sqlite_where=db.text("deleted_at IS NULL"),
        postgresql_where=db.text("deleted_at IS NULL"),
    ).ddl_if(dialect=("sqlite", "postgresql"))
