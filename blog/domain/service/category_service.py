"""Category (taxonomy) domain service."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import ValidationError

from blog.config import TaxonomySettings
from blog.domain.error import (
    ConstraintViolationError,
    DuplicateNameError,
    HasDependentsError,
    NotFoundError,
    ValidationFailedError,
)
from blog.domain.model.category import Category, CategoryWithCount
from blog.domain.repository import CategoryRepository, PostRepository
from blog.domain.value import (
    ById,
    CategoryId,
    HexColor,
    Identifier,
    Slug,
    new_object_id,
    slugify,
)

from .base import Service

UPDATABLE_FIELDS = frozenset({"name", "description", "color"})


class CategoryService(Service):
    """Domain service for category operations.

    Mutations here assume the caller already holds the category management
    capability; that check happens at the API boundary.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        post_repository: PostRepository,
        taxonomy_settings: TaxonomySettings,
    ) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
            post_repository: Post repository (for dependent counts)
            taxonomy_settings: Taxonomy defaults
        """
        self.category_repository = category_repository
        self.post_repository = post_repository
        self.taxonomy_settings = taxonomy_settings

    async def list_categories(self) -> list[CategoryWithCount]:
        """List all categories by name with their post counts.

        Returns:
            Categories ordered by name ascending
        """
        with logfire.span("category_service.list_categories"):
            categories = await self.category_repository.find_all()
            counts = await self.category_repository.count_posts()

            result = [
                CategoryWithCount(
                    category=category, post_count=counts.get(category.id, 0)
                )
                for category in categories
            ]
            logfire.info("Categories listed", count=len(result))
            return result

    async def get_category(self, identifier: Identifier) -> Category:
        """Get a category by ID or slug.

        Args:
            identifier: ``ById`` or ``BySlug``

        Returns:
            The category

        Raises:
            NotFoundError: If no category matches
        """
        with logfire.span("category_service.get_category", identifier=str(identifier)):
            if isinstance(identifier, ById):
                category = await self.category_repository.find_by_id(
                    CategoryId(identifier.id)
                )
                lookup = identifier.id
            else:
                category = await self._find_by_slug(identifier.slug)
                lookup = identifier.slug

            if category is None:
                logfire.warn("Category not found", identifier=lookup)
                raise NotFoundError("Category", lookup)

            return category

    async def get_categories_by_id(
        self, category_ids: list[CategoryId]
    ) -> dict[CategoryId, Category]:
        """Load several categories for populating posts.

        Args:
            category_ids: Category IDs

        Returns:
            Mapping of ID to category; unknown IDs are absent
        """
        return await self.category_repository.find_by_ids(list(set(category_ids)))

    async def create_category(
        self,
        name: str,
        description: str | None = None,
        color: str | None = None,
    ) -> Category:
        """Create a category.

        Args:
            name: Display name (trimmed, unique)
            description: Optional description
            color: Optional hex colour (defaults to the configured blue)

        Returns:
            The created category

        Raises:
            ValidationFailedError: If a field is invalid or the name has no slug
            DuplicateNameError: If the name or its slug is already taken
        """
        with logfire.span("category_service.create_category", name=name):
            now = datetime.now()
            category = self._build(
                {
                    "id": CategoryId(new_object_id()),
                    "name": name,
                    "description": description,
                    "color": color or self.taxonomy_settings.default_color,
                    "created_at": now,
                    "updated_at": now,
                }
            )

            await self._ensure_unique(category)
            saved = await self._save(category)

            logfire.info(
                "Category created", category_id=saved.id, slug=str(saved.slug)
            )
            return saved

    async def update_category(
        self, category_id: CategoryId, changes: dict[str, Any]
    ) -> Category:
        """Apply a partial update to a category.

        Only keys present in ``changes`` are touched; each one is re-validated.
        The slug is re-derived from the (possibly new) name.

        Args:
            category_id: Category ID
            changes: Field name to new value

        Returns:
            The updated category

        Raises:
            NotFoundError: If the category doesn't exist
            ValidationFailedError: If a changed field is invalid
            DuplicateNameError: If the new name or its slug is already taken
        """
        with logfire.span(
            "category_service.update_category",
            category_id=category_id,
            fields=sorted(changes),
        ):
            existing = await self.category_repository.find_by_id(category_id)
            if existing is None:
                logfire.warn("Category not found for update", category_id=category_id)
                raise NotFoundError("Category", category_id)

            unknown = set(changes) - UPDATABLE_FIELDS
            if unknown:
                raise ValidationFailedError(
                    f"Cannot update fields: {', '.join(sorted(unknown))}"
                )

            data = existing.model_dump()
            data.update(changes)
            if data.get("color") is None:
                data["color"] = self.taxonomy_settings.default_color
            data["updated_at"] = datetime.now()
            category = self._build(data)

            await self._ensure_unique(category)
            saved = await self._save(category)

            logfire.info(
                "Category updated", category_id=saved.id, slug=str(saved.slug)
            )
            return saved

    async def delete_category(self, category_id: CategoryId) -> None:
        """Delete a category that no post references.

        Args:
            category_id: Category ID

        Raises:
            NotFoundError: If the category doesn't exist
            HasDependentsError: If posts still reference the category
        """
        with logfire.span("category_service.delete_category", category_id=category_id):
            existing = await self.category_repository.find_by_id(category_id)
            if existing is None:
                logfire.warn("Category not found for delete", category_id=category_id)
                raise NotFoundError("Category", category_id)

            deleted = await self.category_repository.delete_if_unreferenced(
                category_id
            )
            if not deleted:
                count = await self.post_repository.count(category_id=category_id)
                logfire.warn(
                    "Category still has posts",
                    category_id=category_id,
                    post_count=count,
                )
                raise HasDependentsError(count)

            logfire.info("Category deleted", category_id=category_id)

    async def _find_by_slug(self, raw_slug: str) -> Category | None:
        try:
            slug = Slug(raw_slug)
        except ValidationError:
            # A malformed slug cannot match any stored category
            return None
        return await self.category_repository.find_by_slug(slug)

    def _build(self, data: dict[str, Any]) -> Category:
        """Validate fields and derive the slug."""
        name = data.get("name")
        if isinstance(name, str):
            data["name"] = name = name.strip()
        if isinstance(data.get("description"), str):
            data["description"] = data["description"].strip() or None

        slug = slugify(name) if isinstance(name, str) else ""
        if not slug:
            raise ValidationFailedError(
                "name: must contain at least one letter or digit"
            )

        try:
            data["slug"] = Slug(slug)
            data["color"] = HexColor(data["color"])
            return Category(**data)
        except ValidationError as e:
            raise self.validation_failed(e)

    async def _ensure_unique(self, category: Category) -> None:
        """Fast-path duplicate check; the store index has the final say."""
        by_name = await self.category_repository.find_by_name(category.name)
        if by_name is not None and by_name.id != category.id:
            raise DuplicateNameError("Category", category.name)

        by_slug = await self.category_repository.find_by_slug(category.slug)
        if by_slug is not None and by_slug.id != category.id:
            raise DuplicateNameError("Category", category.name)

    async def _save(self, category: Category) -> Category:
        try:
            return await self.category_repository.save(category)
        except ConstraintViolationError as e:
            logfire.warn(
                "Category constraint violated",
                category_id=category.id,
                constraint=e.constraint.value,
            )
            raise DuplicateNameError("Category", category.name)
