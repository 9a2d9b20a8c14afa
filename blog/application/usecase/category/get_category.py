"""Get category use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import (
    CamelModel,
    CategoryResponse,
    PostResponse,
    to_category_response,
)
from blog.application.usecase.post.assembler import PostAssembler
from blog.config import TaxonomySettings
from blog.domain.service import CategoryService, PostService
from blog.domain.value import Identifier


class GetCategoryRequest(BaseModel):
    """Get category request."""

    identifier: Identifier


class GetCategoryResponse(CamelModel):
    """Category with its most recent posts."""

    category: CategoryResponse
    posts: list[PostResponse]


class GetCategoryUseCase:
    """Use case for showing one category and its latest posts."""

    def __init__(
        self,
        category_service: CategoryService,
        post_service: PostService,
        assembler: PostAssembler,
        taxonomy_settings: TaxonomySettings,
    ) -> None:
        """Initialize get category use case.

        Args:
            category_service: Category domain service
            post_service: Post domain service
            assembler: Populates post authors
            taxonomy_settings: Number of recent posts to include
        """
        self.category_service = category_service
        self.post_service = post_service
        self.assembler = assembler
        self.taxonomy_settings = taxonomy_settings

    async def execute(self, request: GetCategoryRequest) -> GetCategoryResponse:
        """Execute get category flow.

        Args:
            request: Identifier of the category

        Returns:
            Category and up to ``recent_posts_limit`` posts, newest first

        Raises:
            NotFoundError: If no category matches
        """
        with logfire.span("get_category.execute", identifier=str(request.identifier)):
            category = await self.category_service.get_category(request.identifier)
            posts = await self.post_service.recent_posts_in_category(
                category.id, self.taxonomy_settings.recent_posts_limit
            )

            return GetCategoryResponse(
                category=to_category_response(category),
                posts=await self.assembler.assemble(posts),
            )
