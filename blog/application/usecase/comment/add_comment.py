"""Add comment use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.common import PostResponse
from blog.application.usecase.post.assembler import PostAssembler
from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str
    user_id: str  # User ID from the verified identity
    content: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post.

    Any authenticated user may comment; post authorship is irrelevant.
    """

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            assembler: Populates authors, commenters and categories
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: AddCommentRequest) -> PostResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The post including the new comment

        Raises:
            ValidationFailedError: If the content is blank
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("add_comment.execute", post_id=request.post_id):
            post = await self.post_service.add_comment(
                user_id=UserId(request.user_id),
                post_id=PostId(request.post_id),
                content=request.content,
            )
            return await self.assembler.assemble_one(post)
