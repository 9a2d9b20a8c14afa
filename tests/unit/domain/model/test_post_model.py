"""Unit tests for the Post model."""

from blog.domain.model.post import EXCERPT_LENGTH, normalize_tags
from blog.domain.value import CategoryId, new_object_id
from tests.factories import make_post


class TestNormalizeTags:
    """Tests for normalize_tags."""

    def test_comma_list_is_trimmed_and_empties_dropped(self):
        assert normalize_tags(" python, web , ,api,") == ["python", "web", "api"]

    def test_duplicates_keep_first_occurrence(self):
        assert normalize_tags(["web", "python", "web"]) == ["web", "python"]

    def test_none_is_empty(self):
        assert normalize_tags(None) == []


class TestPost:
    """Tests for Post."""

    def test_tags_accept_comma_string(self):
        post = make_post(CategoryId(new_object_id()), tags="a, b, a")
        assert post.tags == ["a", "b"]

    def test_excerpt_falls_back_to_content(self):
        post = make_post(CategoryId(new_object_id()), content="x" * 500)
        assert post.excerpt is None
        assert post.display_excerpt == "x" * EXCERPT_LENGTH

    def test_explicit_excerpt_wins(self):
        post = make_post(CategoryId(new_object_id()), excerpt="Short summary")
        assert post.display_excerpt == "Short summary"

    def test_defaults(self):
        post = make_post(CategoryId(new_object_id()))
        assert post.is_published is False
        assert post.view_count == 0
        assert post.comments == []
        assert post.featured_image is None
