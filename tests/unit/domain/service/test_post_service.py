"""Unit tests for PostService."""

import pytest

from blog.domain.error import (
    DuplicateNameError,
    ForbiddenError,
    InvalidCategoryError,
    NotFoundError,
    ValidationFailedError,
)
from blog.domain.repository import CategoryRepository, PostRepository
from blog.domain.service import PostService
from blog.domain.value import (
    ById,
    BySlug,
    CategoryId,
    PageRequest,
    PostId,
    UserId,
    new_object_id,
)
from tests.factories import make_category, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = UserId(new_object_id())
STRANGER = UserId(new_object_id())


async def saved_category(env, name: str = "Technology"):
    repo = await env.get(CategoryRepository)
    return await repo.save(make_category(name))


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_author_is_the_caller(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)

        post = await service.create_post(
            author_id=AUTHOR,
            title="My First Post",
            content="Hello there",
            category_id=category.id,
            tags="python, web, ,python",
        )

        assert post.author_id == AUTHOR
        assert post.slug.root == "my-first-post"
        assert post.tags == ["python", "web"]
        assert post.is_published is False
        assert post.excerpt is None
        assert post.featured_image is None
        assert post.view_count == 0
        assert post.comments == []

    @pytest.mark.asyncio
    async def test_unknown_category(self, unit_env):
        """A post must reference an existing category; nothing is stored."""
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)

        with pytest.raises(InvalidCategoryError):
            await service.create_post(
                author_id=AUTHOR,
                title="Orphan",
                content="No home",
                category_id=CategoryId(new_object_id()),
            )

        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_same_title_collides(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        await service.create_post(AUTHOR, "Same Title", "one", category.id)

        with pytest.raises(DuplicateNameError):
            await service.create_post(STRANGER, "Same title!", "two", category.id)

    @pytest.mark.asyncio
    async def test_symbol_only_title(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)

        with pytest.raises(ValidationFailedError):
            await service.create_post(AUTHOR, "???", "content", category.id)

    @pytest.mark.asyncio
    async def test_blank_content(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)

        with pytest.raises(ValidationFailedError, match="content"):
            await service.create_post(AUTHOR, "Title", "   ", category.id)

    @pytest.mark.asyncio
    async def test_title_too_long(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)

        with pytest.raises(ValidationFailedError, match="title"):
            await service.create_post(AUTHOR, "t" * 101, "content", category.id)

    @pytest.mark.asyncio
    async def test_long_tags_are_kept_whole(self, unit_env):
        """Tags have no length limit of their own."""
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        long_tag = "x" * 120

        post = await service.create_post(
            AUTHOR, "Tagged", "content", category.id, tags=f"short, {long_tag}"
        )

        assert post.tags == ["short", long_tag]


class TestListPosts:
    """Tests for list_posts."""

    @pytest.mark.asyncio
    async def test_pagination_over_fifteen_posts(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        for i in range(15):
            await repo.save(make_post(category.id, title=f"Post {i}", minutes_ago=i))

        second = await service.list_posts(PageRequest(page=2, limit=10))
        third = await service.list_posts(PageRequest(page=3, limit=10))

        assert len(second.items) == 5
        assert second.total_pages == 2
        assert second.total == 15
        assert third.items == []
        assert third.total_pages == 2

    @pytest.mark.asyncio
    async def test_page_far_past_the_end_skips_the_fetch(self, unit_env, monkeypatch):
        """Huge page numbers never reach the store as an offset."""
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        await repo.save(make_post(category.id))

        async def fail_find_all(**kwargs):
            raise AssertionError("find_all should not run past the last page")

        monkeypatch.setattr(repo, "find_all", fail_find_all)

        page = await service.list_posts(PageRequest(page=10**19, limit=10))

        assert page.items == []
        assert page.total == 1
        assert page.total_pages == 1
        assert page.current_page == 10**19

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        await repo.save(make_post(category.id, title="Old", minutes_ago=30))
        await repo.save(make_post(category.id, title="New", minutes_ago=1))
        await repo.save(make_post(category.id, title="Middle", minutes_ago=10))

        page = await service.list_posts(PageRequest())

        assert [p.title for p in page.items] == ["New", "Middle", "Old"]

    @pytest.mark.asyncio
    async def test_category_filter(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        tech = await saved_category(unit_env, "Technology")
        food = await saved_category(unit_env, "Food")
        await repo.save(make_post(tech.id, title="Chips"))
        await repo.save(make_post(food.id, title="Fries"))

        page = await service.list_posts(PageRequest(), category_id=food.id)

        assert [p.title for p in page.items] == ["Fries"]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_published_filter(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        await repo.save(make_post(category.id, title="Draft"))
        await repo.save(make_post(category.id, title="Live", is_published=True))

        everything = await service.list_posts(PageRequest())
        published = await service.list_posts(PageRequest(), published=True)

        assert everything.total == 2
        assert [p.title for p in published.items] == ["Live"]

    @pytest.mark.asyncio
    async def test_listing_does_not_count_views(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        post = await repo.save(make_post(category.id))

        await service.list_posts(PageRequest())

        assert (await repo.find_by_id(post.id)).view_count == 0


class TestGetPost:
    """Tests for get_post."""

    @pytest.mark.asyncio
    async def test_each_fetch_counts_one_view(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        post = await repo.save(make_post(category.id, title="Viewed Post"))

        first = await service.get_post(ById(id=post.id))
        second = await service.get_post(BySlug(slug="viewed-post"))

        assert first.view_count == 1
        assert second.view_count == 2
        assert (await repo.find_by_id(post.id)).view_count == 2

    @pytest.mark.asyncio
    async def test_not_found(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.get_post(ById(id=new_object_id()))
        with pytest.raises(NotFoundError):
            await service.get_post(BySlug(slug="missing"))


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_author_updates_title_and_slug(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Draft Title", "Body", category.id)

        updated = await service.update_post(
            AUTHOR, post.id, {"title": "Final Title", "is_published": True}
        )

        assert updated.slug.root == "final-title"
        assert updated.is_published is True
        assert updated.content == "Body"
        assert updated.author_id == AUTHOR

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden_and_nothing_changes(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)

        with pytest.raises(ForbiddenError):
            await service.update_post(STRANGER, post.id, {"title": "Stolen"})

        assert (await repo.find_by_id(post.id)).title == "Mine"

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.update_post(AUTHOR, PostId(new_object_id()), {"title": "X"})

    @pytest.mark.asyncio
    async def test_move_to_unknown_category(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)

        with pytest.raises(InvalidCategoryError):
            await service.update_post(
                AUTHOR, post.id, {"category_id": CategoryId(new_object_id())}
            )

    @pytest.mark.asyncio
    async def test_update_keeps_comments_and_views(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)
        await service.add_comment(STRANGER, post.id, "Nice")
        await service.get_post(ById(id=post.id))

        updated = await service.update_post(AUTHOR, post.id, {"content": "New body"})

        assert len(updated.comments) == 1
        assert updated.view_count == 1


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_author_deletes_post_and_comments(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)
        await service.add_comment(STRANGER, post.id, "First!")

        await service.delete_post(AUTHOR, post.id)

        assert await repo.find_by_id(post.id) is None
        assert await repo.count() == 0

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, unit_env):
        service = await unit_env.get(PostService)
        repo = await unit_env.get(PostRepository)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)

        with pytest.raises(ForbiddenError):
            await service.delete_post(STRANGER, post.id)

        assert await repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.delete_post(AUTHOR, PostId(new_object_id()))


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_anyone_can_comment_in_order(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)

        await service.add_comment(STRANGER, post.id, "  First  ")
        result = await service.add_comment(AUTHOR, post.id, "Second")

        assert [c.content for c in result.comments] == ["First", "Second"]
        assert [c.user_id for c in result.comments] == [STRANGER, AUTHOR]
        assert result.comments[0].created_at <= result.comments[1].created_at

    @pytest.mark.asyncio
    async def test_blank_comment(self, unit_env):
        service = await unit_env.get(PostService)
        category = await saved_category(unit_env)
        post = await service.create_post(AUTHOR, "Mine", "Body", category.id)

        with pytest.raises(ValidationFailedError):
            await service.add_comment(STRANGER, post.id, "   ")

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.add_comment(STRANGER, PostId(new_object_id()), "Hello")
