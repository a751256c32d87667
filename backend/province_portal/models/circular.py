from province_portal.extensions import db
from .base import BaseModel
from .dated_publication_mixin import DatedPublicationMixin
from .soft_delete_mixin import SoftDeleteMixin, live_unique_index


class Circular(BaseModel, DatedPublicationMixin, SoftDeleteMixin):
    __tablename__ = "circulars"

    __table_args__ = (
        live_unique_index("uq_circulars_live_period", "year", "month"),
    )

    file_path = db.Column(db.String(500), nullable=True)
