"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict, List

from blog.domain.model import Category, Comment, Post, User
from blog.domain.value import (
    CategoryId,
    CommentId,
    HexColor,
    PostId,
    Role,
    Slug,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        email=row["email"],
        avatar_url=row.get("avatar_url"),
        role=Role(row["role"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model.

    Args:
        row: Database row as dict

    Returns:
        Category domain model
    """
    return Category(
        id=CategoryId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        color=HexColor(row["color"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict.

    RootValueObjects (slug, color) dump to their primitive values.
    """
    return category.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        user_id=UserId(row["user_id"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment, post_id: PostId) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model
        post_id: Owning post

    Returns:
        Dict suitable for insertion into the comments table
    """
    data = comment.model_dump()
    data["post_id"] = post_id
    return data


def row_to_post(row: Dict[str, Any], comments: List[Comment] | None = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        comments: Comments fetched separately, in display order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        slug=Slug(row["slug"]),
        content=row["content"],
        excerpt=row.get("excerpt"),
        featured_image=row.get("featured_image"),
        tags=list(row.get("tags") or []),
        is_published=row["is_published"],
        view_count=row["view_count"],
        author_id=UserId(row["author_id"]),
        category_id=CategoryId(row["category_id"]),
        comments=comments or [],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Comments live in their own table and are excluded.
    """
    return post.model_dump(exclude={"comments"})
