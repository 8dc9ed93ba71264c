from typing import Any, Dict, List
from biolink.extensions import db
from biolink.domain.exceptions import PageNotFound
from biolink.models.link import Link
from biolink.models.page import Page
from biolink.repositories.pages import PageRepository
from biolink.application.profile.avatar import get_avatar_url


def get_public_page(slug: str) -> Dict[str, Any]:
    """
    Everything a visitor needs to render a page: the page itself, its
    links in creation order and the owner's avatar URL (may be None).
    """
    page = PageRepository().find_by_slug(slug)
    if not page:
        raise PageNotFound(f"No page at '{slug}'")

    return {
        "page": page,
        "links": list_links(page.id),
        "avatar_url": get_avatar_url(page.user_id),
    }


def list_page_links(page_id: str) -> List[Link]:
    if db.session.get(Page, page_id) is None:
        raise PageNotFound("Page not found")
    return list_links(page_id)


def list_links(page_id: str) -> List[Link]:
    return db.session.execute(
        db.select(Link)
        .filter_by(page_id=page_id)
        .order_by(Link.created_at.asc())
    ).scalars().all()


def list_user_pages(owner_id: str) -> List[Page]:
    return db.session.execute(
        db.select(Page)
        .filter_by(user_id=owner_id)
        .order_by(Page.created_at.desc())
    ).scalars().all()
