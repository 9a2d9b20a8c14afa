"""Domain model entities for the blog."""

from blog.domain.model.category import Category, CategoryWithCount
from blog.domain.model.comment import Comment
from blog.domain.model.post import Post, normalize_tags
from blog.domain.model.user import User

__all__ = [
    "Category",
    "CategoryWithCount",
    "Comment",
    "Post",
    "User",
    "normalize_tags",
]
