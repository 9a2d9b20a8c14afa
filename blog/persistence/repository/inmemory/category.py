"""In-memory category repository for testing."""

from collections import Counter
from typing import Optional

from blog.domain.model.category import Category
from blog.domain.repository.category import CategoryRepository
from blog.domain.value import CategoryId, Slug

from .store import InMemoryStore


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        return self._store.categories.get(category_id)

    async def find_by_ids(
        self, category_ids: list[CategoryId]
    ) -> dict[CategoryId, Category]:
        """Find several categories."""
        return {
            category_id: self._store.categories[category_id]
            for category_id in category_ids
            if category_id in self._store.categories
        }

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug."""
        for category in self._store.categories.values():
            if category.slug == slug:
                return category
        return None

    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by name, ignoring case."""
        for category in self._store.categories.values():
            if category.name.lower() == name.lower():
                return category
        return None

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        return sorted(self._store.categories.values(), key=lambda c: c.name)

    async def count_posts(self) -> dict[CategoryId, int]:
        """Count posts per category."""
        return dict(Counter(p.category_id for p in self._store.posts.values()))

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        self._store.check_category(category)
        self._store.categories[category.id] = category
        return category

    async def delete_if_unreferenced(self, category_id: CategoryId) -> bool:
        """Delete a category unless a post references it."""
        if any(p.category_id == category_id for p in self._store.posts.values()):
            return False
        return self._store.categories.pop(category_id, None) is not None
