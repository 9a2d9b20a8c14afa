"""Get post use case."""

from pydantic import BaseModel

from blog.application.usecase.common import PostResponse
from blog.application.usecase.post.assembler import PostAssembler
from blog.domain.service import PostService
from blog.domain.value import Identifier


class GetPostRequest(BaseModel):
    """Get post request.

    The identifier has already been classified as an ID or a slug.
    """

    identifier: Identifier


class GetPostUseCase:
    """Use case for reading a single post (counts as a view)."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            assembler: Populates authors and categories
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Args:
            request: Identifier of the post

        Returns:
            Post with author, category and comments populated

        Raises:
            NotFoundError: If no post matches
        """
        post = await self.post_service.get_post(request.identifier)
        return await self.assembler.assemble_one(post)
