from province_portal.extensions import db
from .base import BaseModel
from .dated_publication_mixin import DatedPublicationMixin
from .soft_delete_mixin import SoftDeleteMixin, live_unique_index


class NewsLineIssue(BaseModel, DatedPublicationMixin, SoftDeleteMixin):
    __tablename__ = "newsline"

    __table_args__ = (
        live_unique_index("uq_newsline_live_period", "year", "month"),
    )

    cover_image = db.Column(db.String(500), nullable=True)
    pdf_path = db.Column(db.String(500), nullable=True)
    qr_code_url = db.Column(db.String(500), nullable=True)
