from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class Collaboration(BaseModel, SoftDeleteMixin):
    __tablename__ = "collaborations"

    name = db.Column(db.String(255), nullable=False)
    logo = db.Column(db.String(500), nullable=False)
    website = db.Column(db.String(500), nullable=True)
    description = db.Column(db.Text, nullable=True)
    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
