"""Unit tests for pagination value objects."""

import pytest
from pydantic import ValidationError

from blog.domain.value import Page, PageRequest


class TestPageRequest:
    """Tests for PageRequest."""

    def test_offset(self):
        assert PageRequest(page=1, limit=10).offset == 0
        assert PageRequest(page=3, limit=10).offset == 20

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_non_positive(self, page, limit):
        with pytest.raises(ValidationError):
            PageRequest(page=page, limit=limit)


class TestPageBuild:
    """Tests for Page.build."""

    def test_partial_last_page(self):
        page = Page.build(items=list(range(5)), total=15, request=PageRequest(page=2, limit=10))
        assert page.total_pages == 2
        assert page.current_page == 2
        assert len(page.items) == 5

    def test_page_past_the_end(self):
        page = Page.build(items=[], total=15, request=PageRequest(page=3, limit=10))
        assert page.items == []
        assert page.total_pages == 2
        assert page.total == 15

    def test_empty_corpus(self):
        page = Page.build(items=[], total=0, request=PageRequest())
        assert page.total_pages == 0
