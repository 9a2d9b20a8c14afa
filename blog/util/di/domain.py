"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, TaxonomySettings
from blog.domain.repository import (
    CategoryRepository,
    PostRepository,
    UserRepository,
)
from blog.domain.service import (
    CategoryService,
    IdentityService,
    PostService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity domain service (stateless, shared)."""
        return IdentityService(auth_settings=auth_settings)

    @provide
    def get_category_service(
        self,
        category_repository: CategoryRepository,
        post_repository: PostRepository,
        taxonomy_settings: TaxonomySettings,
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(
            category_repository=category_repository,
            post_repository=post_repository,
            taxonomy_settings=taxonomy_settings,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            category_repository=category_repository,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
