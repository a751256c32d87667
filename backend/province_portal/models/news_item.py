from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin, live_unique_index


class NewsItem(BaseModel, SoftDeleteMixin):
    __tablename__ = "news"

    __table_args__ = (
        live_unique_index("uq_news_live_slug", "slug"),
        db.Index("ix_news_visibility", "is_published", "published_at"),
    )

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, index=True)
    content = db.Column(db.Text, nullable=False)
    excerpt = db.Column(db.Text, nullable=True)
    featured_image = db.Column(db.String(500), nullable=True)
    event_date = db.Column(db.Date, nullable=True)

    is_featured = db.Column(db.Boolean, nullable=False, default=False)
    is_published = db.Column(db.Boolean, nullable=False, default=False)
    published_at = db.Column(db.DateTime, nullable=True)
