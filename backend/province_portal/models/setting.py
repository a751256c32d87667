from province_portal.extensions import db
from .base import BaseModel


class Setting(BaseModel):
    __tablename__ = "settings"

    key_name = db.Column(db.String(100), unique=True, nullable=False)
    value = db.Column(db.Text, nullable=True)
    type = db.Column(db.String(20), nullable=False, default="text")
