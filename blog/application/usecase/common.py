"""Response models shared by the category, post and comment use cases."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blog.domain.model import Category, Comment, Post, User
from blog.domain.value import UserId


class CamelModel(BaseModel):
    """Model whose JSON keys are camelCase (``isPublished``, ``createdAt``).

    Snake case field names are still accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummary(CamelModel):
    """Author or commenter as shown next to content."""

    id: str
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None


class CategoryResponse(CamelModel):
    """Category details."""

    id: str
    name: str
    slug: str
    description: str | None
    color: str
    created_at: datetime
    updated_at: datetime


class CommentResponse(CamelModel):
    """Comment embedded in a post response."""

    id: str
    user: UserSummary
    content: str
    created_at: datetime


class PostResponse(CamelModel):
    """Post with author and category populated."""

    id: str
    title: str
    slug: str
    content: str
    excerpt: str
    featured_image: str | None
    tags: list[str]
    is_published: bool
    view_count: int
    author: UserSummary
    category: CategoryResponse | None
    comments: list[CommentResponse]
    created_at: datetime
    updated_at: datetime


def to_user_summary(user_id: UserId, users: dict[UserId, User]) -> UserSummary:
    """Summarize a user, falling back to the bare ID when unknown."""
    user = users.get(user_id)
    if user is None:
        return UserSummary(id=str(user_id))
    return UserSummary(
        id=str(user.id),
        name=user.name,
        email=user.email,
        avatar_url=user.avatar_url,
    )


def to_category_response(category: Category) -> CategoryResponse:
    """Convert a category to its response model."""
    return CategoryResponse(
        id=str(category.id),
        name=category.name,
        slug=str(category.slug),
        description=category.description,
        color=str(category.color),
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def to_comment_response(comment: Comment, users: dict[UserId, User]) -> CommentResponse:
    """Convert a comment to its response model."""
    return CommentResponse(
        id=str(comment.id),
        user=to_user_summary(comment.user_id, users),
        content=comment.content,
        created_at=comment.created_at,
    )


def to_post_response(
    post: Post,
    users: dict[UserId, User],
    category: Category | None,
) -> PostResponse:
    """Convert a post to its response model.

    Args:
        post: Post to convert
        users: Directory entries for the author and commenters
        category: The post's category (None if it vanished)

    Returns:
        Populated post response
    """
    return PostResponse(
        id=str(post.id),
        title=post.title,
        slug=str(post.slug),
        content=post.content,
        excerpt=post.display_excerpt,
        featured_image=post.featured_image,
        tags=list(post.tags),
        is_published=post.is_published,
        view_count=post.view_count,
        author=to_user_summary(post.author_id, users),
        category=to_category_response(category) if category else None,
        comments=[to_comment_response(c, users) for c in post.comments],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def referenced_user_ids(posts: list[Post]) -> list[UserId]:
    """Collect author and commenter IDs from posts."""
    ids: list[UserId] = []
    for post in posts:
        ids.append(post.author_id)
        ids.extend(comment.user_id for comment in post.comments)
    return ids
