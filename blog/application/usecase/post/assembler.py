"""Populates posts with their author, commenters and category."""

from blog.application.usecase.common import (
    PostResponse,
    referenced_user_ids,
    to_post_response,
)
from blog.domain.model import Post
from blog.domain.service import CategoryService, UserService


class PostAssembler:
    """Builds post responses with two batched lookups per call."""

    def __init__(
        self, category_service: CategoryService, user_service: UserService
    ) -> None:
        self.category_service = category_service
        self.user_service = user_service

    async def assemble(self, posts: list[Post]) -> list[PostResponse]:
        """Populate a list of posts, keeping their order."""
        if not posts:
            return []

        users = await self.user_service.get_users(referenced_user_ids(posts))
        categories = await self.category_service.get_categories_by_id(
            [post.category_id for post in posts]
        )
        return [
            to_post_response(post, users, categories.get(post.category_id))
            for post in posts
        ]

    async def assemble_one(self, post: Post) -> PostResponse:
        """Populate a single post."""
        (response,) = await self.assemble([post])
        return response
