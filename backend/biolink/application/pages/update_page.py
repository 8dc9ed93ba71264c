import logging
from typing import Any, Dict
from biolink.domain.exceptions import InvariantViolation
from biolink.domain.invariants.page import assert_page_title
from biolink.models.page import Page
from biolink.utils.transaction import transactional
from .access import get_owned_page

logger = logging.getLogger(__name__)

ALLOWED_UPDATE_FIELDS = ("title", "description")


def update_page(
    *,
    page_id: str,
    owner_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only title and description are mutable
    - The slug never follows the title
    - Requests without any mutable field fail
    """
    page = get_owned_page(page_id=page_id, owner_id=owner_id)

    if "slug" in data:
        raise InvariantViolation("The slug of a page cannot be changed.")

    if not any(field in data for field in ALLOWED_UPDATE_FIELDS):
        raise InvariantViolation("No valid fields provided for update")

    if "title" in data:
        assert_page_title(data["title"])

    changed_fields: list[str] = []

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(page, field) != data[field]:
                setattr(page, field, data[field])
                changed_fields.append(field)

    logger.info("Page %s updated, fields=%s", page.id, changed_fields)
    return page
