"""PostgreSQL repository implementations."""

from blog.persistence.repository.category import PostgresCategoryRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCategoryRepository",
    "PostgresPostRepository",
    "PostgresUserRepository",
]
