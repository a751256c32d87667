from province_portal.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin

GALLERY_TYPES = ("photo", "video")


class GalleryItem(BaseModel, SoftDeleteMixin):
    __tablename__ = "gallery"

    title = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(10), nullable=False, index=True)
    file_path = db.Column(db.String(500), nullable=False)
    thumbnail = db.Column(db.String(500), nullable=True)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(100), nullable=True, index=True)
    is_featured = db.Column(db.Boolean, nullable=False, default=False)
    order_index = db.Column(db.Integer, nullable=False, default=0)
