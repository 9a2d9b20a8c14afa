"""Slug generation for categories and posts."""

import re

_DISALLOWED = re.compile(r"[^\w ]+", re.ASCII)
_SPACES = re.compile(r" +")


def slugify(text: str) -> str:
    """Convert a name or title to a URL-safe slug.

    Lower-cases the text, drops every character that is not an ASCII word
    character or a space, then joins the remaining words with single hyphens.

    Examples:
        "Technology" -> "technology"
        "Hello, World!  Again" -> "hello-world-again"
        "!!!" -> ""

    Args:
        text: Name or title

    Returns:
        Slug, empty when the text has no word characters
    """
    cleaned = _DISALLOWED.sub("", text.lower()).strip()
    return _SPACES.sub("-", cleaned)
