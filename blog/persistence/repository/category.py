"""PostgreSQL implementation of Category repository."""

from typing import Optional

import logfire
from sqlalchemy import exists, func, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import Constraint
from blog.domain.model import Category
from blog.domain.repository import CategoryRepository
from blog.domain.value import CategoryId, Slug
from blog.persistence.errors import constraint_of, translate
from blog.persistence.mappers import category_to_dict, row_to_category
from blog.persistence.tables import categories_table, posts_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_ids(
        self, category_ids: list[CategoryId]
    ) -> dict[CategoryId, Category]:
        """Find several categories in one query."""
        if not category_ids:
            return {}
        stmt = select(categories_table).where(
            categories_table.c.id.in_(set(category_ids))
        )
        result = await self.session.execute(stmt)
        categories = [row_to_category(row._asdict()) for row in result.fetchall()]
        return {category.id: category for category in categories}

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find a category by slug."""
        stmt = select(categories_table).where(categories_table.c.slug == str(slug))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by name, ignoring case."""
        stmt = select(categories_table).where(
            func.lower(categories_table.c.name) == name.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        with logfire.span("category_repository.find_all"):
            stmt = select(categories_table).order_by(categories_table.c.name.asc())
            result = await self.session.execute(stmt)
            return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def count_posts(self) -> dict[CategoryId, int]:
        """Count posts per category in one grouped query."""
        stmt = select(posts_table.c.category_id, func.count()).group_by(
            posts_table.c.category_id
        )
        result = await self.session.execute(stmt)
        return {CategoryId(row[0]): row[1] for row in result.fetchall()}

    async def save(self, category: Category) -> Category:
        """Insert or update a category."""
        with logfire.span(
            "category_repository.save",
            category_id=category.id,
            slug=str(category.slug),
        ):
            values = category_to_dict(category)
            try:
                stmt = (
                    categories_table.update()
                    .where(categories_table.c.id == category.id)
                    .values(**{k: v for k, v in values.items() if k != "created_at"})
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.info("Inserting new category", category_id=category.id)
                    await self.session.execute(
                        categories_table.insert().values(**values)
                    )
                await self.session.flush()
            except DBAPIError as e:
                logfire.warn("Category write rejected", error=str(e.orig))
                raise translate(e) from e

            return category

    async def delete_if_unreferenced(self, category_id: CategoryId) -> bool:
        """Delete the category in one statement unless a post references it.

        A post inserted concurrently either sees the category gone (foreign
        key failure on its side) or makes this statement hit the foreign key.
        """
        with logfire.span(
            "category_repository.delete_if_unreferenced", category_id=category_id
        ):
            referenced = exists().where(
                posts_table.c.category_id == categories_table.c.id
            )
            stmt = categories_table.delete().where(
                categories_table.c.id == category_id, ~referenced
            )
            # Savepoint so a foreign key failure leaves the transaction usable
            try:
                async with self.session.begin_nested():
                    result = await self.session.execute(stmt)
            except IntegrityError as e:
                if constraint_of(e) == Constraint.POST_CATEGORY:
                    return False
                raise translate(e) from e
            except DBAPIError as e:
                raise translate(e) from e

            return result.rowcount > 0
