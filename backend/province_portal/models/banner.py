from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin

BANNER_TYPES = ("hero", "flash_news")


class Banner(BaseModel, SoftDeleteMixin):
    __tablename__ = "banners"

    type = db.Column(db.String(20), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=True)
    subtitle = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=True)
    image = db.Column(db.String(500), nullable=True)
    link_url = db.Column(db.String(500), nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
