from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class QuickLink(BaseModel, SoftDeleteMixin):
    __tablename__ = "quick_links"

    title = db.Column(db.String(255), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    icon = db.Column(db.String(100), nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
