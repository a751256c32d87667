from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin

DEFAULT_BACKGROUND_COLOR = "#6B46C1"


class BirthdayWish(BaseModel, SoftDeleteMixin):
    __tablename__ = "birthday_wishes"

    name = db.Column(db.String(255), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    message = db.Column(db.Text, nullable=True)
    profile_image = db.Column(db.String(500), nullable=True)
    background_color = db.Column(db.String(7), nullable=False, default=DEFAULT_BACKGROUND_COLOR)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
