"""Category routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials

from blog.application.usecase.category import (
    CategoryWithCountResponse,
    CreateCategoryRequest,
    CreateCategoryUseCase,
    DeleteCategoryRequest,
    DeleteCategoryUseCase,
    GetCategoryRequest,
    GetCategoryResponse,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryRequest,
    UpdateCategoryUseCase,
)
from blog.application.usecase.common import CamelModel, CategoryResponse
from blog.domain.service import IdentityService
from blog.domain.value import Capability, parse_identifier
from blog.interface.api.envelope import Envelope, ListEnvelope
from blog.interface.api.security import bearer_scheme, require_identity

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


class CreateCategoryAPIRequest(CamelModel):
    """API request for creating a category."""

    name: str
    description: str | None = None
    color: str | None = None


class UpdateCategoryAPIRequest(CamelModel):
    """API request for updating a category.

    Omitted fields are left unchanged.
    """

    name: str | None = None
    description: str | None = None
    color: str | None = None


@router.get("", response_model=ListEnvelope[CategoryWithCountResponse])
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListEnvelope[CategoryWithCountResponse]:
    """List all categories with post counts, ordered by name."""
    result = await list_categories_use_case.execute()
    return ListEnvelope(count=len(result.categories), data=result.categories)


@router.get("/{id_or_slug}", response_model=Envelope[GetCategoryResponse])
async def get_category(
    id_or_slug: str,
    get_category_use_case: FromDishka[GetCategoryUseCase],
) -> Envelope[GetCategoryResponse]:
    """Get a category by ID or slug with its most recent posts."""
    result = await get_category_use_case.execute(
        GetCategoryRequest(identifier=parse_identifier(id_or_slug))
    )
    return Envelope(data=result)


@router.post(
    "",
    response_model=Envelope[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    request: CreateCategoryAPIRequest,
    create_category_use_case: FromDishka[CreateCategoryUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[CategoryResponse]:
    """Create a category.

    Requires the category management capability (admin).
    """
    identity = require_identity(
        credentials, identity_service, Capability.MANAGE_CATEGORIES
    )
    result = await create_category_use_case.execute(
        CreateCategoryRequest(
            name=request.name,
            description=request.description,
            color=request.color,
        )
    )
    logfire.info("Category created via API", category_id=result.id, by=identity.user_id)
    return Envelope(data=result)


@router.put("/{category_id}", response_model=Envelope[CategoryResponse])
async def update_category(
    category_id: str,
    request: UpdateCategoryAPIRequest,
    update_category_use_case: FromDishka[UpdateCategoryUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[CategoryResponse]:
    """Update a category's name, description or colour.

    Requires the category management capability (admin).
    """
    require_identity(credentials, identity_service, Capability.MANAGE_CATEGORIES)
    result = await update_category_use_case.execute(
        UpdateCategoryRequest(
            category_id=category_id,
            changes=request.model_dump(exclude_unset=True),
        )
    )
    return Envelope(data=result)


@router.delete("/{category_id}", response_model=Envelope[dict])
async def delete_category(
    category_id: str,
    delete_category_use_case: FromDishka[DeleteCategoryUseCase],
    identity_service: FromDishka[IdentityService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Envelope[dict]:
    """Delete a category no post references.

    Requires the category management capability (admin).
    """
    require_identity(credentials, identity_service, Capability.MANAGE_CATEGORIES)
    await delete_category_use_case.execute(
        DeleteCategoryRequest(category_id=category_id)
    )
    return Envelope(data={})
