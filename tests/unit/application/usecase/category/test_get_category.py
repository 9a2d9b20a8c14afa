"""Unit tests for GetCategoryUseCase."""

import pytest

from blog.application.usecase.category import GetCategoryRequest, GetCategoryUseCase
from blog.domain.error import NotFoundError
from blog.domain.model import User
from blog.domain.repository import CategoryRepository, PostRepository, UserRepository
from blog.domain.value import BySlug, UserId, new_object_id
from tests.factories import make_category, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCategoryUseCase:
    """Tests for GetCategoryUseCase."""

    @pytest.mark.asyncio
    async def test_returns_ten_most_recent_posts_with_authors(self, unit_env):
        use_case = await unit_env.get(GetCategoryUseCase)
        categories = await unit_env.get(CategoryRepository)
        posts = await unit_env.get(PostRepository)
        users = await unit_env.get(UserRepository)

        author = await users.save(
            User(id=UserId(new_object_id()), name="Jane Doe", email="jane@example.com")
        )
        travel = await categories.save(make_category("Travel"))
        food = await categories.save(make_category("Food"))
        for i in range(12):
            await posts.save(
                make_post(travel.id, title=f"Trip {i}", author_id=author.id, minutes_ago=i)
            )
        await posts.save(make_post(food.id, title="Pasta"))

        result = await use_case.execute(
            GetCategoryRequest(identifier=BySlug(slug="travel"))
        )

        assert result.category.id == travel.id
        assert len(result.posts) == 10
        assert result.posts[0].title == "Trip 0"
        assert result.posts[-1].title == "Trip 9"
        assert result.posts[0].author.name == "Jane Doe"
        assert result.posts[0].category.slug == "travel"

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env):
        use_case = await unit_env.get(GetCategoryUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCategoryRequest(identifier=BySlug(slug="nope")))
