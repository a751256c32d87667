from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin, live_unique_index


class Page(BaseModel, SoftDeleteMixin):
    __tablename__ = "pages"

    __table_args__ = (
        live_unique_index("uq_pages_live_slug", "slug"),
        db.Index("ix_pages_menu", "parent_menu", "sort_order", "menu_position"),
    )

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, index=True)
    content = db.Column(db.Text, nullable=True)
    excerpt = db.Column(db.Text, nullable=True)

    meta_title = db.Column(db.String(255), nullable=True)
    meta_description = db.Column(db.Text, nullable=True)
    featured_image = db.Column(db.String(500), nullable=True)

    # Navigation
    menu_label = db.Column(db.String(255), nullable=True)
    menu_position = db.Column(db.Integer, nullable=False, default=0)
    parent_menu = db.Column(db.String(50), nullable=True)
    is_submenu = db.Column(db.Boolean, nullable=False, default=False)
    show_in_menu = db.Column(db.Boolean, nullable=False, default=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    is_enabled = db.Column(db.Boolean, nullable=False, default=True)
    is_featured = db.Column(db.Boolean, nullable=False, default=False)
