import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from biolink.domain.exceptions import SlugConflictError
from biolink.domain.invariants.page import assert_page_title
from biolink.models.page import Page
from biolink.repositories.pages import PageRepository
from .slugs import is_slug_taken

logger = logging.getLogger(__name__)


def create_page(
    *,
    title: str,
    description: Optional[str],
    owner_id: str,
    repo: Optional[PageRepository] = None,
) -> Page:
    """
    Create a page whose slug is derived from its title.

    Edge cases handled:
    - Blank title, or one that normalizes to an empty slug (InvalidTitleError)
    - Slug already taken (SlugConflictError, nothing written)
    - Slug taken between the pre-check and the insert (unique constraint
      on pages.slug, mapped to the same SlugConflictError)
    """
    repo = repo or PageRepository()
    slug = assert_page_title(title)

    if is_slug_taken(slug, repo=repo):
        logger.info("Slug %r already taken, rejecting page creation", slug)
        raise SlugConflictError(slug)

    try:
        page = repo.insert(
            title=title,
            description=description,
            user_id=owner_id,
            slug=slug,
        )
    except IntegrityError as exc:
        if repo.find_by_slug(slug) is None:
            raise
        logger.warning("Slug %r claimed concurrently, rejecting page creation", slug)
        raise SlugConflictError(slug) from exc

    logger.info("Page %s created at slug %r by user %s", page.id, slug, owner_id)
    return page
