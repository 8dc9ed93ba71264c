import logging
from typing import Any, Dict, Optional
from biolink.extensions import db
from biolink.domain.exceptions import InvalidLinkError, LinkNotFound
from biolink.domain.invariants.link import assert_link
from biolink.models.link import Link
from biolink.application.pages.access import get_owned_page
from biolink.utils.media import delete_file, may_use_media
from biolink.utils.transaction import transactional

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = ("title", "url", "image_url")


def _get_owned_link(*, link_id: str, owner_id: str) -> Link:
    link = db.session.get(Link, link_id)
    if not link:
        raise LinkNotFound("Link not found")

    # Raises NotPageOwner for links on someone else's page
    get_owned_page(page_id=link.page_id, owner_id=owner_id)
    return link


def _assert_link_image(link, owner_id):
    if not may_use_media(link.image_url, owner_id):
        raise InvalidLinkError("Link image must be one of your own uploads.")


def add_link(
    *,
    page_id: str,
    owner_id: str,
    title: str,
    url: str,
    image_url: Optional[str] = None,
) -> Link:
    page = get_owned_page(page_id=page_id, owner_id=owner_id)

    link = Link()
    link.page_id = page.id
    link.title = title
    link.url = url
    link.image_url = image_url

    assert_link(link)
    _assert_link_image(link, owner_id)

    with transactional():
        db.session.add(link)
        db.session.flush()

    logger.info("Link %s added to page %s", link.id, page.id)
    return link


def update_link(
    *,
    link_id: str,
    owner_id: str,
    data: Dict[str, Any],
) -> Link:
    """
    Edit title, url or image_url of a link.

    A replaced image is removed from storage once the edit is committed.
    """
    link = _get_owned_link(link_id=link_id, owner_id=owner_id)
    previous_image = link.image_url

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data:
                setattr(link, field, data[field])
        assert_link(link)
        if link.image_url != previous_image:
            _assert_link_image(link, owner_id)

    if previous_image and previous_image != link.image_url:
        delete_file(previous_image, owner_id=owner_id)

    return link


def remove_link(*, link_id: str, owner_id: str) -> None:
    link = _get_owned_link(link_id=link_id, owner_id=owner_id)
    image_url = link.image_url

    with transactional():
        db.session.delete(link)

    if image_url and not delete_file(image_url, owner_id=owner_id):
        logger.debug("Image %s of link %s kept in storage", image_url, link_id)

    logger.info("Link %s removed", link_id)
