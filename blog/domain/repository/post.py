"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.model.post import Post
from blog.domain.value import CategoryId, PostId, Slug


class PostRepository(ABC):
    """Repository for the Post aggregate.

    Posts are returned with their comments, oldest comment first.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug.

        Args:
            slug: Post slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category_id: Optional[CategoryId] = None,
        published: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts, newest first, with filtering and pagination.

        Args:
            category_id: Only posts in this category (None for all)
            published: Only posts with this publication flag (None for all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        category_id: Optional[CategoryId] = None,
        published: Optional[bool] = None,
    ) -> int:
        """Count posts matching the given filters.

        Args:
            category_id: Only posts in this category (None for all)
            published: Only posts with this publication flag (None for all)

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update). Comments are not written here.

        Args:
            post: The post to save

        Returns:
            The saved post

        Raises:
            ConstraintViolationError: If the slug is taken or the category is gone
            StorageError: On any other store failure
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its comments in one operation.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment the view counter by 1.

        Args:
            post_id: The post ID

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass

    @abstractmethod
    async def add_comment(self, post_id: PostId, comment: Comment) -> Optional[Post]:
        """Append a comment to a post.

        Args:
            post_id: The post ID
            comment: Comment to append

        Returns:
            Updated post, or None if the post doesn't exist
        """
        pass
