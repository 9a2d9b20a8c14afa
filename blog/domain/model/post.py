"""Post aggregate root.

A post owns its comments: deleting the post deletes them with it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel
from blog.domain.value import CategoryId, PostId, Slug, UserId

EXCERPT_LENGTH = 200


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    title: str = Field(min_length=1, max_length=100)
    slug: Slug
    content: str = Field(min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=EXCERPT_LENGTH)
    featured_image: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    is_published: bool = False
    view_count: int = Field(default=0, ge=0)
    author_id: UserId
    category_id: CategoryId
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: str | list[str] | None) -> list[str]:
        """Tags are trimmed, non-empty and unique, in first-seen order."""
        return normalize_tags(v)

    @property
    def display_excerpt(self) -> str:
        """Excerpt, or the start of the content when none was written."""
        if self.excerpt:
            return self.excerpt
        return self.content[:EXCERPT_LENGTH]


def normalize_tags(tags: str | list[str] | None) -> list[str]:
    """Split, trim and de-duplicate tags.

    Accepts either a comma separated string ("python, web, ,api") or a list.

    Args:
        tags: Raw tag input

    Returns:
        Ordered list of unique non-empty tags
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")

    result: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in result:
            result.append(tag)
    return result
