from biolink.extensions import db
from biolink.domain.exceptions import PageNotFound, NotPageOwner
from biolink.models.page import Page


def get_owned_page(*, page_id: str, owner_id: str) -> Page:
    page = db.session.get(Page, page_id)

    if not page:
        raise PageNotFound("Page not found")

    if page.user_id != owner_id:
        raise NotPageOwner("You do not own this page")

    return page
