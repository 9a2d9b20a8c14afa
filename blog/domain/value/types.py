"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class Role(str, Enum):
    """Roles carried by verified identities."""

    USER = "user"
    ADMIN = "admin"


class Capability(str, Enum):
    """Actions gated at the API boundary."""

    MANAGE_CATEGORIES = "manage_categories"
    WRITE_POSTS = "write_posts"
    COMMENT = "comment"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.USER: frozenset({Capability.WRITE_POSTS, Capability.COMMENT}),
    Role.ADMIN: frozenset(
        {Capability.MANAGE_CATEGORIES, Capability.WRITE_POSTS, Capability.COMMENT}
    ),
}


class Slug(RootValueObject[str]):
    """URL-safe slug for categories and posts.

    Lower-case word characters separated by single hyphens.
    Examples: 'technology', 'my-first-post', 'python_tips-2024'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9_]+(?:-[a-z0-9_]+)*$", v):
            raise ValueError(
                "Slug must be lowercase word characters with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        return v


class HexColor(RootValueObject[str]):
    """Display colour as ``#RGB`` or ``#RRGGBB``."""

    @field_validator("root")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        """Validate hex colour format."""
        if not re.match(r"^#(?:[0-9a-fA-F]{3}){1,2}$", v):
            raise ValueError("Color must be a hex value like #3B82F6")
        return v.upper()
