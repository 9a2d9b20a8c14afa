"""Update category use case."""

from typing import Any

from pydantic import BaseModel

from blog.application.usecase.common import CategoryResponse, to_category_response
from blog.domain.service import CategoryService
from blog.domain.value import CategoryId


class UpdateCategoryRequest(BaseModel):
    """Update category request.

    ``changes`` holds only the fields the caller supplied.
    """

    category_id: str
    changes: dict[str, Any]


class UpdateCategoryUseCase:
    """Use case for editing a category."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize update category use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: UpdateCategoryRequest) -> CategoryResponse:
        """Execute update category flow.

        Raises:
            NotFoundError: If the category doesn't exist
            ValidationFailedError: If a changed field is invalid
            DuplicateNameError: If the new name is already taken
        """
        category = await self.category_service.update_category(
            CategoryId(request.category_id), request.changes
        )
        return to_category_response(category)
