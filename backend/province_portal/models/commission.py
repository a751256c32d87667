from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class Commission(BaseModel, SoftDeleteMixin):
    __tablename__ = "commissions"

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(100), nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
