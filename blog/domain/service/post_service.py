"""Post (content) domain service."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import ValidationError

from blog.domain.error import (
    Constraint,
    ConstraintViolationError,
    DuplicateNameError,
    ForbiddenError,
    InvalidCategoryError,
    NotFoundError,
    ValidationFailedError,
)
from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.repository import CategoryRepository, PostRepository
from blog.domain.value import (
    ById,
    CategoryId,
    CommentId,
    Identifier,
    Page,
    PageRequest,
    PostId,
    Slug,
    UserId,
    new_object_id,
    slugify,
)

from .base import Service

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "content",
        "excerpt",
        "featured_image",
        "tags",
        "is_published",
        "category_id",
    }
)


class PostService(Service):
    """Domain service for post operations.

    Authorship is checked here: only a post's author may change or delete it.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            category_repository: Category repository (to validate references)
        """
        self.post_repository = post_repository
        self.category_repository = category_repository

    async def list_posts(
        self,
        page_request: PageRequest,
        category_id: CategoryId | None = None,
        published: bool | None = None,
    ) -> Page[Post]:
        """List posts newest first.

        Never touches view counts.

        Args:
            page_request: Page number and size
            category_id: Only posts in this category
            published: Only posts with this publication flag

        Returns:
            One page of posts with totals
        """
        with logfire.span(
            "post_service.list_posts",
            page=page_request.page,
            limit=page_request.limit,
            category_id=category_id,
            published=published,
        ):
            total = await self.post_repository.count(
                category_id=category_id, published=published
            )
            # Past the last page: no query, so any page number stays a 200
            if page_request.offset >= total:
                posts = []
            else:
                posts = await self.post_repository.find_all(
                    category_id=category_id,
                    published=published,
                    limit=page_request.limit,
                    offset=page_request.offset,
                )
            logfire.info("Posts listed", count=len(posts), total=total)
            return Page.build(posts, total, page_request)

    async def recent_posts_in_category(
        self, category_id: CategoryId, limit: int
    ) -> list[Post]:
        """Most recent posts of one category.

        Args:
            category_id: Category ID
            limit: Maximum number of posts

        Returns:
            Posts, newest first
        """
        return await self.post_repository.find_all(
            category_id=category_id, limit=limit, offset=0
        )

    async def get_post(self, identifier: Identifier) -> Post:
        """Fetch a single post and count the view.

        Args:
            identifier: ``ById`` or ``BySlug``

        Returns:
            The post with its view count already incremented

        Raises:
            NotFoundError: If no post matches
        """
        with logfire.span("post_service.get_post", identifier=str(identifier)):
            if isinstance(identifier, ById):
                post = await self.post_repository.find_by_id(PostId(identifier.id))
                lookup = identifier.id
            else:
                post = await self._find_by_slug(identifier.slug)
                lookup = identifier.slug

            if post is None:
                logfire.warn("Post not found", identifier=lookup)
                raise NotFoundError("Post", lookup)

            viewed = await self.post_repository.increment_view_count(post.id)
            if viewed is None:
                # Deleted between the lookup and the increment
                raise NotFoundError("Post", lookup)

            logfire.info("Post viewed", post_id=viewed.id, view_count=viewed.view_count)
            return viewed

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        category_id: CategoryId,
        excerpt: str | None = None,
        featured_image: str | None = None,
        tags: str | list[str] | None = None,
        is_published: bool = False,
    ) -> Post:
        """Create a post authored by the caller.

        Args:
            author_id: Authenticated caller (becomes the author)
            title: Post title
            content: Post body
            category_id: Category the post belongs to
            excerpt: Optional summary
            featured_image: Optional image URL
            tags: Comma separated string or list of tags
            is_published: Publication flag

        Returns:
            The created post

        Raises:
            InvalidCategoryError: If the category doesn't exist
            ValidationFailedError: If a field is invalid
            DuplicateNameError: If the title's slug is taken
        """
        with logfire.span(
            "post_service.create_post",
            author_id=author_id,
            title=title,
            category_id=category_id,
        ):
            await self._require_category(category_id)

            now = datetime.now()
            post = self._build(
                {
                    "id": PostId(new_object_id()),
                    "title": title,
                    "content": content,
                    "excerpt": excerpt,
                    "featured_image": featured_image,
                    "tags": tags,
                    "is_published": is_published,
                    "view_count": 0,
                    "author_id": author_id,
                    "category_id": category_id,
                    "comments": [],
                    "created_at": now,
                    "updated_at": now,
                }
            )

            saved = await self._save(post)
            logfire.info("Post created", post_id=saved.id, slug=str(saved.slug))
            return saved

    async def update_post(
        self, user_id: UserId, post_id: PostId, changes: dict[str, Any]
    ) -> Post:
        """Apply a partial update to a post owned by the caller.

        Args:
            user_id: Authenticated caller
            post_id: Post ID
            changes: Field name to new value (only present keys change)

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
            InvalidCategoryError: If the new category doesn't exist
            ValidationFailedError: If a changed field is invalid
            DuplicateNameError: If the new title's slug is taken
        """
        with logfire.span(
            "post_service.update_post",
            post_id=post_id,
            user_id=user_id,
            fields=sorted(changes),
        ):
            existing = await self._get_owned(user_id, post_id)

            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise ValidationFailedError(
                    f"Cannot update fields: {', '.join(sorted(unknown))}"
                )

            if "category_id" in changes and changes["category_id"] != existing.category_id:
                await self._require_category(changes["category_id"])

            data = existing.model_dump()
            data.update(changes)
            data["updated_at"] = datetime.now()
            post = self._build(data)

            saved = await self._save(post)
            logfire.info("Post updated", post_id=saved.id, slug=str(saved.slug))
            return saved

    async def delete_post(self, user_id: UserId, post_id: PostId) -> None:
        """Delete a post owned by the caller, comments included.

        Args:
            user_id: Authenticated caller
            post_id: Post ID

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        with logfire.span("post_service.delete_post", post_id=post_id, user_id=user_id):
            await self._get_owned(user_id, post_id)

            deleted = await self.post_repository.delete(post_id)
            if not deleted:
                raise NotFoundError("Post", post_id)

            logfire.info("Post deleted", post_id=post_id)

    async def add_comment(
        self, user_id: UserId, post_id: PostId, content: str
    ) -> Post:
        """Append a comment to any post.

        Args:
            user_id: Authenticated commenter
            post_id: Post ID
            content: Comment text

        Returns:
            The post including the new comment

        Raises:
            ValidationFailedError: If the content is blank or too long
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.add_comment", post_id=post_id, user_id=user_id):
            content = (content or "").strip()
            try:
                comment = Comment(
                    id=CommentId(new_object_id()),
                    user_id=user_id,
                    content=content,
                    created_at=datetime.now(),
                )
            except ValidationError as e:
                raise self.validation_failed(e)

            try:
                updated = await self.post_repository.add_comment(post_id, comment)
            except ConstraintViolationError:
                updated = None

            if updated is None:
                logfire.warn("Post not found for comment", post_id=post_id)
                raise NotFoundError("Post", post_id)

            logfire.info(
                "Comment added",
                post_id=post_id,
                comment_id=comment.id,
                comment_count=len(updated.comments),
            )
            return updated

    async def _get_owned(self, user_id: UserId, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", post_id)
        if post.author_id != user_id:
            logfire.warn("Non-author attempted change", post_id=post_id, user_id=user_id)
            raise ForbiddenError("post", post_id, user_id)
        return post

    async def _require_category(self, category_id: CategoryId) -> None:
        if not category_id or not await self.category_repository.find_by_id(category_id):
            logfire.warn("Post references unknown category", category_id=category_id)
            raise InvalidCategoryError(str(category_id))

    async def _find_by_slug(self, raw_slug: str) -> Post | None:
        try:
            slug = Slug(raw_slug)
        except ValidationError:
            return None
        return await self.post_repository.find_by_slug(slug)

    def _build(self, data: dict[str, Any]) -> Post:
        """Validate fields and derive the slug."""
        for field in ("title", "excerpt", "featured_image"):
            if isinstance(data.get(field), str):
                data[field] = data[field].strip()
        for field in ("excerpt", "featured_image"):
            if data.get(field) == "":
                data[field] = None

        title = data.get("title")
        slug = slugify(title) if isinstance(title, str) else ""
        if not slug:
            raise ValidationFailedError(
                "title: must contain at least one letter or digit"
            )
        if isinstance(data.get("content"), str) and not data["content"].strip():
            raise ValidationFailedError("content: must not be blank")

        try:
            data["slug"] = Slug(slug)
            return Post(**data)
        except ValidationError as e:
            raise self.validation_failed(e)

    async def _save(self, post: Post) -> Post:
        try:
            return await self.post_repository.save(post)
        except ConstraintViolationError as e:
            logfire.warn(
                "Post constraint violated",
                post_id=post.id,
                constraint=e.constraint.value,
            )
            if e.constraint == Constraint.POST_CATEGORY:
                raise InvalidCategoryError(post.category_id)
            if e.constraint == Constraint.POST_SLUG:
                raise DuplicateNameError("Post", post.title)
            raise
