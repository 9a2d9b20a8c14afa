"""Unit tests for identifiers and id/slug disambiguation."""

import time

from blog.domain.value import (
    ById,
    BySlug,
    is_object_id,
    new_object_id,
    parse_identifier,
)


class TestNewObjectId:
    """Tests for new_object_id."""

    def test_shape(self):
        value = new_object_id()
        assert len(value) == 24
        assert value == value.lower()
        assert is_object_id(value)

    def test_unique(self):
        assert len({new_object_id() for _ in range(100)}) == 100

    def test_starts_with_creation_timestamp(self):
        before = int(time.time())
        value = new_object_id()
        after = int(time.time())
        assert before <= int(value[:8], 16) <= after


class TestParseIdentifier:
    """Tests for parse_identifier."""

    def test_24_hex_is_an_id(self):
        raw = "507f1f77bcf86cd799439011"
        assert parse_identifier(raw) == ById(id=raw)

    def test_upper_case_hex_is_normalized(self):
        assert parse_identifier("507F1F77BCF86CD799439011") == ById(
            id="507f1f77bcf86cd799439011"
        )

    def test_anything_else_is_a_slug(self):
        assert parse_identifier("technology") == BySlug(slug="technology")

    def test_23_hex_chars_is_a_slug(self):
        raw = "507f1f77bcf86cd79943901"
        assert parse_identifier(raw) == BySlug(slug=raw)

    def test_24_chars_with_non_hex_is_a_slug(self):
        raw = "507f1f77bcf86cd79943901z"
        assert parse_identifier(raw) == BySlug(slug=raw)
