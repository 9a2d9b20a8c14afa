"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Find several users."""
        return {
            user_id: self._store.users[user_id]
            for user_id in user_ids
            if user_id in self._store.users
        }

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._store.users[user.id] = user
        return user
