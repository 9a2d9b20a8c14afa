"""Create category use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.common import CategoryResponse, to_category_response
from blog.domain.service import CategoryService


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    name: str
    description: str | None = None
    color: str | None = None  # Falls back to the configured default


class CreateCategoryUseCase(BaseUseCase):
    """Use case for adding a category to the taxonomy."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize create category use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self, request: CreateCategoryRequest) -> CategoryResponse:
        """Execute create category flow.

        Raises:
            ValidationFailedError: If a field is invalid
            DuplicateNameError: If the name is already taken
        """
        category = await self.category_service.create_category(
            name=request.name,
            description=request.description,
            color=request.color,
        )
        return to_category_response(category)
