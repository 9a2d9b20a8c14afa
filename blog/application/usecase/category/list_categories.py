"""List categories use case."""

from pydantic import BaseModel

from blog.application.usecase.common import CategoryResponse, to_category_response
from blog.domain.service import CategoryService


class CategoryWithCountResponse(CategoryResponse):
    """Category plus the number of posts referencing it."""

    post_count: int


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryWithCountResponse]


class ListCategoriesUseCase:
    """Use case for listing every category."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self) -> ListCategoriesResponse:
        """Execute list categories flow.

        Returns:
            Categories ordered by name with post counts
        """
        entries = await self.category_service.list_categories()
        return ListCategoriesResponse(
            categories=[
                CategoryWithCountResponse(
                    **to_category_response(entry.category).model_dump(),
                    post_count=entry.post_count,
                )
                for entry in entries
            ]
        )
