import re

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w-]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"-{2,}")


def slugify(text: str) -> str:
    """
    Convert a page title into a URL-safe slug.

    Example: "Hello World!" -> "hello-world"

    Only ASCII word characters survive, so accented letters are dropped
    ("Café day" -> "caf-day"). Degenerate input yields an empty string;
    callers decide whether that is acceptable.
    """
    slug = str(text).lower()
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _NON_WORD.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.lstrip("-").rstrip("-")
