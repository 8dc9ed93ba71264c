import logging
from contextlib import contextmanager
from biolink.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional():
    """
    Run the block in the current session's transaction.

    Commits when the block finishes, rolls back and re-raises on any
    error so the session stays usable for the rest of the request.
    """
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        logger.debug("Transaction rolled back", exc_info=True)
        raise
