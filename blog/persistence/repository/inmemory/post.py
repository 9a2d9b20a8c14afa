"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import CategoryId, PostId, Slug

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._store.posts.values():
            if post.slug == slug:
                return post
        return None

    def _matching(
        self, category_id: Optional[CategoryId], published: Optional[bool]
    ) -> list[Post]:
        posts = list(self._store.posts.values())
        if category_id is not None:
            posts = [p for p in posts if p.category_id == category_id]
        if published is not None:
            posts = [p for p in posts if p.is_published == published]
        return posts

    async def find_all(
        self,
        category_id: Optional[CategoryId] = None,
        published: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts newest first with filtering and pagination."""
        posts = self._matching(category_id, published)

        # Later insertion wins ties on created_at
        ordered = sorted(
            enumerate(posts), key=lambda item: (item[1].created_at, item[0]), reverse=True
        )
        return [post for _, post in ordered][offset : offset + limit]

    async def count(
        self,
        category_id: Optional[CategoryId] = None,
        published: Optional[bool] = None,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._matching(category_id, published))

    async def save(self, post: Post) -> Post:
        """Save or update a post, keeping stored comments and view count."""
        self._store.check_post(post)

        existing = self._store.posts.get(post.id)
        if existing is not None:
            post = post.model_copy(
                update={
                    "comments": existing.comments,
                    "view_count": existing.view_count,
                    "author_id": existing.author_id,
                    "created_at": existing.created_at,
                }
            )
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post together with its comments."""
        return self._store.posts.pop(post_id, None) is not None

    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Add one view."""
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        post = post.model_copy(update={"view_count": post.view_count + 1})
        self._store.posts[post_id] = post
        return post

    async def add_comment(self, post_id: PostId, comment: Comment) -> Optional[Post]:
        """Append a comment."""
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        post = post.model_copy(
            update={
                "comments": [*post.comments, comment],
                "updated_at": datetime.now(),
            }
        )
        self._store.posts[post_id] = post
        return post
