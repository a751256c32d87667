from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class CouncilMember(BaseModel, SoftDeleteMixin):
    __tablename__ = "council_members"

    name = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(255), nullable=False)
    image = db.Column(db.String(500), nullable=True)
    bio = db.Column(db.Text, nullable=True)

    # Facet keys; matched by string only.
    dimension = db.Column(db.String(100), nullable=True, index=True)
    commission = db.Column(db.String(100), nullable=True, index=True)

    order_index = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
