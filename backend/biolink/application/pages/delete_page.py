import logging
from biolink.extensions import db
from biolink.utils.media import delete_file
from biolink.utils.transaction import transactional
from .access import get_owned_page

logger = logging.getLogger(__name__)


def delete_page(
    *,
    page_id: str,
    owner_id: str,
) -> None:
    """
    Delete a page together with its links.

    Notes:
    - Links go through the ORM cascade on Page.links
    - Stored link images are removed after the commit succeeds
    """
    page = get_owned_page(page_id=page_id, owner_id=owner_id)
    image_urls = list(dict.fromkeys(link.image_url for link in page.links if link.image_url))

    with transactional():
        db.session.delete(page)

    for url in image_urls:
        delete_file(url, owner_id=owner_id)

    logger.info("Page %s deleted with %d link image(s)", page_id, len(image_urls))
