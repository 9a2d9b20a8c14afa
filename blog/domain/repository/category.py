"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.category import Category
from blog.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository for the Category aggregate.

    Uniqueness of ``name`` and ``slug`` is enforced by the store; a write that
    breaks it raises ``ConstraintViolationError``.
    """

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID.

        Args:
            category_id: The category's unique identifier

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, category_ids: list[CategoryId]
    ) -> dict[CategoryId, Category]:
        """Find several categories in a single query.

        Args:
            category_ids: Category IDs to look up

        Returns:
            Mapping of ID to category (missing categories are absent)
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug.

        Args:
            slug: Category slug

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by name, ignoring case.

        Args:
            name: Category name

        Returns:
            The category if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name ascending.

        Returns:
            List of categories
        """
        pass

    @abstractmethod
    async def count_posts(self) -> dict[CategoryId, int]:
        """Count posts per category in a single query.

        Returns:
            Mapping of category ID to post count (categories without posts may be absent)
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update).

        Args:
            category: The category to save

        Returns:
            The saved category

        Raises:
            ConstraintViolationError: If the name or slug is already taken
            StorageError: On any other store failure
        """
        pass

    @abstractmethod
    async def delete_if_unreferenced(self, category_id: CategoryId) -> bool:
        """Delete a category only if no post references it.

        The reference check and the delete happen in one store operation.

        Args:
            category_id: The category ID to delete

        Returns:
            True if deleted, False if posts still reference it
        """
        pass
