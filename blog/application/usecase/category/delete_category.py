"""Delete category use case."""

from pydantic import BaseModel

from blog.domain.service import CategoryService
from blog.domain.value import CategoryId


class DeleteCategoryRequest(BaseModel):
    """Delete category request."""

    category_id: str


class DeleteCategoryUseCase:
    """Use case for removing an unused category."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: DeleteCategoryRequest) -> None:
        """Execute delete category flow.

        Raises:
            NotFoundError: If the category doesn't exist
            HasDependentsError: If posts still reference it
        """
        await self.category_service.delete_category(CategoryId(request.category_id))
