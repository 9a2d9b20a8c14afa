"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.common import PostResponse
from blog.application.usecase.post.assembler import PostAssembler
from blog.domain.service import PostService
from blog.domain.value import CategoryId, PageRequest


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    category_id: str | None = None  # Exact match on the category reference
    published: bool | None = None  # None lists published and drafts


class ListPostsResponse(BaseModel):
    """List posts response."""

    items: list[PostResponse]
    current_page: int
    total_pages: int
    total: int


class ListPostsUseCase:
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            assembler: Populates authors and categories
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of posts, newest first
        """
        with logfire.span(
            "list_posts.execute",
            page=request.page,
            limit=request.limit,
            category_id=request.category_id,
        ):
            page = await self.post_service.list_posts(
                PageRequest(page=request.page, limit=request.limit),
                category_id=CategoryId(request.category_id)
                if request.category_id
                else None,
                published=request.published,
            )

            return ListPostsResponse(
                items=await self.assembler.assemble(page.items),
                current_page=page.current_page,
                total_pages=page.total_pages,
                total=page.total,
            )
