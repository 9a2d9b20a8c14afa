"""Column widths must hold anything the domain models accept."""

import pytest
from sqlalchemy import String

from blog.domain.model import Category, Comment, Post, User
from blog.persistence.tables import (
    categories_table,
    comments_table,
    posts_table,
    users_table,
)


def max_length(model, field: str) -> int | None:
    for constraint in model.model_fields[field].metadata:
        length = getattr(constraint, "max_length", None)
        if length is not None:
            return length
    return None


@pytest.mark.parametrize(
    "column, model, field",
    [
        (categories_table.c.name, Category, "name"),
        (categories_table.c.description, Category, "description"),
        (posts_table.c.title, Post, "title"),
        (posts_table.c.excerpt, Post, "excerpt"),
        (posts_table.c.content, Post, "content"),
        (comments_table.c.content, Comment, "content"),
        (users_table.c.name, User, "name"),
        (users_table.c.email, User, "email"),
    ],
)
def test_column_fits_model_limit(column, model, field):
    width = column.type.length
    limit = max_length(model, field)

    if width is not None:
        assert limit is not None and limit <= width


def test_tags_are_unbounded_text():
    item_type = posts_table.c.tags.type.item_type

    assert isinstance(item_type, String)
    assert item_type.length is None
