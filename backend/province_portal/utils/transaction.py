import logging
from contextlib import contextmanager

from province_portal.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """Commit the session when the block finishes; roll back and re-raise on error."""
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        logger.debug("Transaction rolled back: %s", exc.__class__.__name__)
        raise
