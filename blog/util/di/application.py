"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.category import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from blog.application.usecase.comment import AddCommentUseCase
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostAssembler,
    UpdatePostUseCase,
)
from blog.config import TaxonomySettings
from blog.domain.service import CategoryService, PostService, UserService
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped since they depend on REQUEST-scoped domain services.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_assembler(
        self, category_service: CategoryService, user_service: UserService
    ) -> PostAssembler:
        """Provide post assembler."""
        return PostAssembler(
            category_service=category_service, user_service=user_service
        )

    # Categories

    @provide
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide
    def get_get_category_use_case(
        self,
        category_service: CategoryService,
        post_service: PostService,
        assembler: PostAssembler,
        taxonomy_settings: TaxonomySettings,
    ) -> GetCategoryUseCase:
        """Provide get category use case."""
        return GetCategoryUseCase(
            category_service=category_service,
            post_service=post_service,
            assembler=assembler,
            taxonomy_settings=taxonomy_settings,
        )

    @provide
    def get_create_category_use_case(
        self, category_service: CategoryService
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(category_service=category_service)

    @provide
    def get_update_category_use_case(
        self, category_service: CategoryService
    ) -> UpdateCategoryUseCase:
        """Provide update category use case."""
        return UpdateCategoryUseCase(category_service=category_service)

    @provide
    def get_delete_category_use_case(
        self, category_service: CategoryService
    ) -> DeleteCategoryUseCase:
        """Provide delete category use case."""
        return DeleteCategoryUseCase(category_service=category_service)

    # Posts

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_create_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comments

    @provide
    def get_add_comment_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(post_service=post_service, assembler=assembler)
