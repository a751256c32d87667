from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class Message(BaseModel, SoftDeleteMixin):
    __tablename__ = "messages"

    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author_name = db.Column(db.String(255), nullable=True)
    author_title = db.Column(db.String(255), nullable=True)
    author_image = db.Column(db.String(500), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
