"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment, Post
from blog.domain.repository import PostRepository
from blog.domain.value import CategoryId, PostId, Slug
from blog.persistence.errors import translate
from blog.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_post,
)
from blog.persistence.tables import comments_table, posts_table

# Columns an update never overwrites; view_count only moves through increments
_IMMUTABLE_ON_UPDATE = frozenset({"id", "created_at", "view_count", "author_id"})


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_comments_for_posts(
        self, post_ids: list[str]
    ) -> dict[str, list[Comment]]:
        """Fetch comments for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> comments in append order
        """
        if not post_ids:
            return {}

        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id.in_(post_ids))
            .order_by(comments_table.c.created_at, comments_table.c.seq)
        )
        result = await self.session.execute(stmt)

        comment_map: dict[str, list[Comment]] = defaultdict(list)
        for row in result.fetchall():
            comment_map[row.post_id].append(row_to_comment(row._asdict()))
        return comment_map

    async def _to_posts(self, rows: List[Any]) -> List[Post]:
        comment_map = await self._fetch_comments_for_posts([row.id for row in rows])
        return [
            row_to_post(row._asdict(), comments=comment_map.get(row.id, []))
            for row in rows
        ]

    async def _find_one(self, *criteria: Any) -> Optional[Post]:
        stmt = select(posts_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        (post,) = await self._to_posts([row])
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            return await self._find_one(posts_table.c.id == post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            return await self._find_one(posts_table.c.slug == str(slug))

    def _filters(
        self, category_id: Optional[CategoryId], published: Optional[bool]
    ) -> list[Any]:
        criteria = []
        if category_id is not None:
            criteria.append(posts_table.c.category_id == category_id)
        if published is not None:
            criteria.append(posts_table.c.is_published == published)
        return criteria

    async def find_all(
        self,
        category_id: Optional[CategoryId] = None,
        published: Optional[bool] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            category_id=category_id,
            published=published,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(*self._filters(category_id, published))
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()
            if not rows:
                return []

            posts = await self._to_posts(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        category_id: Optional[CategoryId] = None,
        published: Optional[bool] = None,
    ) -> int:
        """Count posts matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*self._filters(category_id, published))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Insert or update a post's own columns (comments untouched)."""
        with logfire.span(
            "post_repository.save", post_id=post.id, slug=str(post.slug)
        ):
            values = post_to_dict(post)
            try:
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(
                        **{
                            k: v
                            for k, v in values.items()
                            if k not in _IMMUTABLE_ON_UPDATE
                        }
                    )
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                if row is None:
                    logfire.info("Inserting new post", post_id=post.id)
                    stmt = posts_table.insert().values(**values).returning(posts_table)
                    result = await self.session.execute(stmt)
                    row = result.fetchone()
                await self.session.flush()
            except DBAPIError as e:
                logfire.warn("Post write rejected", error=str(e.orig))
                raise translate(e) from e

            (saved,) = await self._to_posts([row])
            return saved

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post; its comments go with it (ON DELETE CASCADE)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except DBAPIError as e:
            raise translate(e) from e
        return result.rowcount > 0

    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically add one view and return the post as stored."""
        with logfire.span("post_repository.increment_view_count", post_id=post_id):
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post_id)
                .values(view_count=posts_table.c.view_count + 1)
                .returning(posts_table)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            except DBAPIError as e:
                raise translate(e) from e

            if row is None:
                return None
            (post,) = await self._to_posts([row])
            return post

    async def add_comment(self, post_id: PostId, comment: Comment) -> Optional[Post]:
        """Append a comment, touching the post's updated_at.

        The post row is updated first so a missing post appends nothing.
        """
        with logfire.span("post_repository.add_comment", post_id=post_id):
            try:
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post_id)
                    .values(updated_at=datetime.now())
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                if row is None:
                    return None

                await self.session.execute(
                    comments_table.insert().values(**comment_to_dict(comment, post_id))
                )
                await self.session.flush()
            except DBAPIError as e:
                raise translate(e) from e

            (post,) = await self._to_posts([row])
            return post
