from urllib.parse import urlparse
from biolink.domain.exceptions import InvalidLinkError

ALLOWED_URL_SCHEMES = {"http", "https"}

MAX_TITLE_LENGTH = 200
MAX_URL_LENGTH = 2048
MAX_IMAGE_URL_LENGTH = 512


def _is_blank(value):
    return not isinstance(value, str) or not value.strip()


def assert_link(link):
    if _is_blank(link.title) or _is_blank(link.url):
        raise InvalidLinkError("Both title and URL are required for a link.")

    if len(link.title) > MAX_TITLE_LENGTH:
        raise InvalidLinkError(f"Link title must be at most {MAX_TITLE_LENGTH} characters.")

    if len(link.url) > MAX_URL_LENGTH:
        raise InvalidLinkError(f"Link URL must be at most {MAX_URL_LENGTH} characters.")

    parsed = urlparse(link.url)
    if parsed.scheme not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        raise InvalidLinkError(f"Invalid link URL: {link.url}")

    if link.image_url is not None:
        if not isinstance(link.image_url, str):
            raise InvalidLinkError("Link image URL must be a string.")
        if len(link.image_url) > MAX_IMAGE_URL_LENGTH:
            raise InvalidLinkError(
                f"Link image URL must be at most {MAX_IMAGE_URL_LENGTH} characters."
            )
