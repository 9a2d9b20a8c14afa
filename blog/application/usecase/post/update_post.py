"""Update post use case."""

from typing import Any

from pydantic import BaseModel

from blog.application.usecase.common import PostResponse
from blog.application.usecase.post.assembler import PostAssembler
from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    ``changes`` holds only the fields the caller supplied.
    """

    post_id: str
    user_id: str  # Current user ID (must be the author)
    changes: dict[str, Any]


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            assembler: Populates authors and categories
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Args:
            request: Post ID, caller and changed fields

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
            InvalidCategoryError: If the new category doesn't exist
        """
        post = await self.post_service.update_post(
            user_id=UserId(request.user_id),
            post_id=PostId(request.post_id),
            changes=request.changes,
        )
        return await self.assembler.assemble_one(post)
