"""Shared in-memory store.

One store lives for the whole container (APP scope) so that data survives
across requests; repositories are thin per-request views over it. It enforces
the same unique and foreign-key rules as the database schema.
"""

from blog.domain.error import Constraint, ConstraintViolationError
from blog.domain.model import Category, Post, User
from blog.domain.value import CategoryId, PostId, UserId


class InMemoryStore:
    """Process-local tables for tests and local development."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.categories: dict[CategoryId, Category] = {}
        self.posts: dict[PostId, Post] = {}

    def check_category(self, category: Category) -> None:
        """Reject a category whose name or slug belongs to another one."""
        for other in self.categories.values():
            if other.id == category.id:
                continue
            if other.name.lower() == category.name.lower():
                raise ConstraintViolationError(Constraint.CATEGORY_NAME)
            if other.slug == category.slug:
                raise ConstraintViolationError(Constraint.CATEGORY_SLUG)

    def check_post(self, post: Post) -> None:
        """Reject a post with a taken slug or a dangling category."""
        if post.category_id not in self.categories:
            raise ConstraintViolationError(Constraint.POST_CATEGORY)
        for other in self.posts.values():
            if other.id != post.id and other.slug == post.slug:
                raise ConstraintViolationError(Constraint.POST_SLUG)
