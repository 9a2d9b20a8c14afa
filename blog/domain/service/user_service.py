"""User domain service."""

import logfire

from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for the author directory."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_users(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load users for populating authors and commenters.

        Args:
            user_ids: IDs to look up (duplicates allowed)

        Returns:
            Mapping of ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_users", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            missing = len(unique_ids) - len(users)
            if missing:
                logfire.debug("Some users not in directory", missing=missing)
            return users

    async def ensure_user(self, user: User) -> User:
        """Create a directory entry unless one with the same email exists.

        Args:
            user: User to create

        Returns:
            The existing or newly saved user
        """
        with logfire.span("user_service.ensure_user", email=user.email):
            existing = await self.user_repository.find_by_email(user.email)
            if existing:
                logfire.info("User already exists", user_id=existing.id)
                return existing

            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=saved.id, role=saved.role.value)
            return saved
