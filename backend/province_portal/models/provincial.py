from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin

PROVINCIAL_TITLES = ("provincial", "vice_provincial", "economer", "secretary")


class Provincial(BaseModel, SoftDeleteMixin):
    __tablename__ = "provincials"

    name = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(50), nullable=False, index=True)
    image = db.Column(db.String(500), nullable=True)
    bio = db.Column(db.Text, nullable=True)
    period_start = db.Column(db.Date, nullable=True)
    period_end = db.Column(db.Date, nullable=True)
    is_current = db.Column(db.Boolean, nullable=False, default=False)
    order_index = db.Column(db.Integer, nullable=False, default=0)
