"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .identity_service import IdentityService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "CategoryService",
    "IdentityService",
    "PostService",
    "Service",
    "UserService",
]
