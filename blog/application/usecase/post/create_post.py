"""Create post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.common import PostResponse
from blog.application.usecase.post.assembler import PostAssembler
from blog.domain.service import PostService
from blog.domain.value import CategoryId, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from the verified identity, never from the body
    title: str
    content: str
    category_id: str
    excerpt: str | None = None
    featured_image: str | None = None
    tags: str | list[str] | None = None  # "a, b, c" or ["a", "b", "c"]
    is_published: bool = False


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            assembler: Populates authors and categories
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            InvalidCategoryError: If the category doesn't exist
            ValidationFailedError: If a field is invalid
            DuplicateNameError: If another post already has this title's slug
        """
        with logfire.span("create_post.execute", title=request.title):
            post = await self.post_service.create_post(
                author_id=UserId(request.author_id),
                title=request.title,
                content=request.content,
                category_id=CategoryId(request.category_id),
                excerpt=request.excerpt,
                featured_image=request.featured_image,
                tags=request.tags,
                is_published=request.is_published,
            )
            return await self.assembler.assemble_one(post)
