"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    ById,
    BySlug,
    CategoryId,
    CommentId,
    Identifier,
    PostId,
    UserId,
    is_object_id,
    new_object_id,
    parse_identifier,
)
from blog.domain.value.identity import Identity
from blog.domain.value.pagination import Page, PageRequest
from blog.domain.value.slug import slugify
from blog.domain.value.types import (
    ROLE_CAPABILITIES,
    Capability,
    HexColor,
    Role,
    Slug,
)

__all__ = [
    # Identifiers
    "UserId",
    "CategoryId",
    "PostId",
    "CommentId",
    "ById",
    "BySlug",
    "Identifier",
    "Identity",
    "is_object_id",
    "new_object_id",
    "parse_identifier",
    # Pagination
    "Page",
    "PageRequest",
    # Types
    "Capability",
    "HexColor",
    "Role",
    "ROLE_CAPABILITIES",
    "Slug",
    "slugify",
]
