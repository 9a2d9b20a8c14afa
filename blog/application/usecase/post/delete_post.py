"""Delete post use case."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be the author)


class DeletePostUseCase:
    """Use case for deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            ForbiddenError: If the caller is not the author
        """
        await self.post_service.delete_post(
            user_id=UserId(request.user_id), post_id=PostId(request.post_id)
        )
