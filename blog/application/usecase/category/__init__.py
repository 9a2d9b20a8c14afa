"""Category use cases."""

from .create_category import CreateCategoryRequest, CreateCategoryUseCase
from .delete_category import DeleteCategoryRequest, DeleteCategoryUseCase
from .get_category import GetCategoryRequest, GetCategoryResponse, GetCategoryUseCase
from .list_categories import (
    CategoryWithCountResponse,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)
from .update_category import UpdateCategoryRequest, UpdateCategoryUseCase

__all__ = [
    "CategoryWithCountResponse",
    "CreateCategoryRequest",
    "CreateCategoryUseCase",
    "DeleteCategoryRequest",
    "DeleteCategoryUseCase",
    "GetCategoryRequest",
    "GetCategoryResponse",
    "GetCategoryUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
    "UpdateCategoryRequest",
    "UpdateCategoryUseCase",
]
