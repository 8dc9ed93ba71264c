from typing import Optional
from biolink.repositories.pages import PageRepository


def is_slug_taken(slug: str, *, repo: Optional[PageRepository] = None) -> bool:
    """True only when a page with exactly this slug exists."""
    repo = repo or PageRepository()
    return repo.find_by_slug(slug) is not None
