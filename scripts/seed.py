#!/usr/bin/env python3
"""Seed sample categories and users.

Safe to run repeatedly: existing categories (matched by name) and users
(matched by email) are left alone.
"""

import asyncio
import sys

import logfire

from blog.config import Settings
from blog.domain.error import DuplicateNameError
from blog.domain.model import User
from blog.domain.service import CategoryService, UserService
from blog.domain.value import Role, UserId, new_object_id
from blog.util.di.container import create_container
from blog.util.observability import configure_logfire

CATEGORIES = [
    {
        "name": "Technology",
        "description": "Latest tech trends and innovations",
        "color": "#3B82F6",
    },
    {
        "name": "Lifestyle",
        "description": "Tips for better living",
        "color": "#10B981",
    },
    {
        "name": "Travel",
        "description": "Adventures around the world",
        "color": "#F59E0B",
    },
    {
        "name": "Food",
        "description": "Delicious recipes and food reviews",
        "color": "#EF4444",
    },
    {
        "name": "Business",
        "description": "Business insights and strategies",
        "color": "#8B5CF6",
    },
]

USERS = [
    {"name": "Admin User", "email": "admin@example.com", "role": Role.ADMIN},
    {"name": "John Doe", "email": "john@example.com", "role": Role.USER},
]


async def seed() -> None:
    container = create_container()
    try:
        async with container() as request_container:
            category_service = await request_container.get(CategoryService)
            user_service = await request_container.get(UserService)

            for data in CATEGORIES:
                try:
                    await category_service.create_category(**data)
                except DuplicateNameError:
                    logfire.info("Category already seeded", name=data["name"])

            for data in USERS:
                user = await user_service.ensure_user(
                    User(id=UserId(new_object_id()), **data)
                )
                logfire.info("User ready", user_id=user.id, email=user.email)
    finally:
        await container.close()


def main() -> int:
    """Seed the database configured in the environment."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("seed"):
        asyncio.run(seed())

    logfire.info("Seeding completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
