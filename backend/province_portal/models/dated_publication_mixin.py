from province_portal.extensions import db


class DatedPublicationMixin:
    """Monthly publications: one live record per (year, month)."""

    title = db.Column(db.String(255), nullable=False)
    month = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)
    description = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
