import logging
from typing import Optional
from biolink.extensions import db
from biolink.domain.exceptions import InvariantViolation
from biolink.models.avatar import Avatar
from biolink.utils.media import delete_file, may_use_media
from biolink.utils.transaction import transactional

logger = logging.getLogger(__name__)

MAX_IMAGE_URL_LENGTH = 512


def get_avatar_url(user_id: str) -> Optional[str]:
    avatar = db.session.execute(
        db.select(Avatar).filter_by(user_id=user_id)
    ).scalar_one_or_none()
    return avatar.image_url if avatar else None


def set_avatar(*, user_id: str, image_url: str) -> Avatar:
    """Create or replace the avatar of a user."""
    if not isinstance(image_url, str) or not image_url.strip() or len(image_url) > MAX_IMAGE_URL_LENGTH:
        raise InvariantViolation("A valid image_url is required.")

    if not may_use_media(image_url, user_id):
        raise InvariantViolation("Avatar must be one of your own uploads.")

    avatar = db.session.execute(
        db.select(Avatar).filter_by(user_id=user_id)
    ).scalar_one_or_none()

    previous_image = None
    if not avatar:
        avatar = Avatar()
        avatar.user_id = user_id
    else:
        previous_image = avatar.image_url

    with transactional():
        avatar.image_url = image_url
        db.session.add(avatar)

    if previous_image and previous_image != image_url:
        delete_file(previous_image, owner_id=user_id)

    logger.info("Avatar set for user %s", user_id)
    return avatar
