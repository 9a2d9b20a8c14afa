"""Unit tests for the in-memory repositories' store rules."""

import pytest

from blog.domain.error import Constraint, ConstraintViolationError
from blog.domain.model import Comment
from blog.domain.value import CategoryId, CommentId, Slug, UserId, new_object_id
from blog.persistence.repository.inmemory import (
    InMemoryCategoryRepository,
    InMemoryPostRepository,
    InMemoryStore,
)
from tests.factories import make_category, make_post


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def categories(store):
    return InMemoryCategoryRepository(store)


@pytest.fixture
def posts(store):
    return InMemoryPostRepository(store)


class TestCategoryConstraints:
    """Unique name and slug."""

    @pytest.mark.asyncio
    async def test_name_is_unique_ignoring_case(self, categories):
        await categories.save(make_category("Travel"))

        with pytest.raises(ConstraintViolationError) as exc_info:
            await categories.save(make_category("TRAVEL", slug=Slug("travel-2")))

        assert exc_info.value.constraint == Constraint.CATEGORY_NAME

    @pytest.mark.asyncio
    async def test_slug_is_unique(self, categories):
        await categories.save(make_category("Travel"))

        with pytest.raises(ConstraintViolationError) as exc_info:
            await categories.save(make_category("Travel!"))

        assert exc_info.value.constraint == Constraint.CATEGORY_SLUG

    @pytest.mark.asyncio
    async def test_resave_same_category(self, categories):
        category = await categories.save(make_category("Travel"))

        updated = await categories.save(category.model_copy(update={"description": "Trips"}))

        assert updated.description == "Trips"

    @pytest.mark.asyncio
    async def test_delete_if_unreferenced(self, categories, posts):
        travel = await categories.save(make_category("Travel"))
        food = await categories.save(make_category("Food"))
        await posts.save(make_post(travel.id))

        assert await categories.delete_if_unreferenced(travel.id) is False
        assert await categories.delete_if_unreferenced(food.id) is True
        assert await categories.delete_if_unreferenced(CategoryId(new_object_id())) is False
        assert await categories.count_posts() == {travel.id: 1}

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_unknown(self, categories):
        travel = await categories.save(make_category("Travel"))
        food = await categories.save(make_category("Food"))
        missing = CategoryId(new_object_id())

        found = await categories.find_by_ids([travel.id, missing, food.id])

        assert found == {travel.id: travel, food.id: food}


class TestPostConstraints:
    """Unique slug and category reference."""

    @pytest.mark.asyncio
    async def test_dangling_category(self, posts):
        with pytest.raises(ConstraintViolationError) as exc_info:
            await posts.save(make_post(CategoryId(new_object_id())))

        assert exc_info.value.constraint == Constraint.POST_CATEGORY

    @pytest.mark.asyncio
    async def test_slug_is_unique(self, categories, posts):
        category = await categories.save(make_category())
        await posts.save(make_post(category.id, title="Hello World"))

        with pytest.raises(ConstraintViolationError) as exc_info:
            await posts.save(make_post(category.id, title="Hello, World"))

        assert exc_info.value.constraint == Constraint.POST_SLUG

    @pytest.mark.asyncio
    async def test_delete_removes_comments(self, categories, posts):
        category = await categories.save(make_category())
        post = await posts.save(make_post(category.id))
        await posts.add_comment(
            post.id,
            Comment(
                id=CommentId(new_object_id()),
                user_id=UserId(new_object_id()),
                content="Hi",
            ),
        )

        assert await posts.delete(post.id) is True
        assert await posts.find_by_id(post.id) is None
        assert await posts.delete(post.id) is False

    @pytest.mark.asyncio
    async def test_ties_on_created_at_list_latest_insert_first(self, categories, posts):
        category = await categories.save(make_category())
        first = make_post(category.id, title="First")
        second = make_post(category.id, title="Second", created_at=first.created_at)
        await posts.save(first)
        await posts.save(second)

        result = await posts.find_all()

        assert [p.title for p in result] == ["Second", "First"]
