from biolink.domain.exceptions import InvalidTitleError
from biolink.domain.slug import slugify

MAX_TITLE_LENGTH = 200


def assert_page_title(title) -> str:
    """
    Validate a page title and return the slug it derives.

    Rejected before any lookup:
    - missing or blank title
    - title longer than MAX_TITLE_LENGTH
    - title that normalizes to an empty slug (e.g. "!!!")
    """
    if not isinstance(title, str) or not title.strip():
        raise InvalidTitleError("Title is required.")

    if len(title) > MAX_TITLE_LENGTH:
        raise InvalidTitleError(
            f"Title must be at most {MAX_TITLE_LENGTH} characters."
        )

    slug = slugify(title)
    if not slug:
        raise InvalidTitleError(
            "Title must contain at least one letter or digit."
        )

    return slug
