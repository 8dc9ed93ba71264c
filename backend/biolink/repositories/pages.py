import logging
from typing import Optional

from biolink.extensions import db
from biolink.models.page import Page
from biolink.utils.transaction import transactional

logger = logging.getLogger(__name__)


class PageRepository:
    """
    Persistence collaborator for page creation.

    Exposes exactly two capabilities: an exact-slug lookup and an insert
    that surfaces storage-level constraint failures (IntegrityError)
    unchanged, after rolling the session back.
    """

    def find_by_slug(self, slug: str) -> Optional[Page]:
        # Zero rows -> None; any other failure propagates.
        return db.session.execute(
            db.select(Page).filter_by(slug=slug)
        ).scalar_one_or_none()

    def insert(
        self,
        *,
        title: str,
        description: Optional[str],
        user_id: str,
        slug: str,
    ) -> Page:
        page = Page()
        page.title = title
        page.description = description
        page.user_id = user_id
        page.slug = slug

        with transactional():
            db.session.add(page)
            db.session.flush()  # raises IntegrityError on a slug collision

        logger.debug("Inserted page %s with slug %r", page.id, slug)
        return page
