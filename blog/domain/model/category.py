"""Category aggregate.

Categories form the blog's taxonomy. Every post belongs to exactly one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CategoryId, HexColor, Slug


class Category(DomainModel):
    """Category aggregate root.

    The slug is always derived from the name; it is never accepted from clients.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=50)
    slug: Slug
    description: Optional[str] = Field(default=None, max_length=200)
    color: HexColor = HexColor("#3B82F6")
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class CategoryWithCount(DomainModel):
    """Category annotated with the number of posts referencing it."""

    category: Category
    post_count: int = Field(ge=0)
