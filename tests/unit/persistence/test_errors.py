"""Unit tests for database error translation."""

from sqlalchemy.exc import IntegrityError, OperationalError

from blog.domain.error import Constraint, ConstraintViolationError, StorageError
from blog.persistence.errors import constraint_of, translate


class DriverError(Exception):
    """Stand-in for an asyncpg exception."""

    def __init__(self, message: str, constraint_name: str | None = None):
        super().__init__(message)
        self.constraint_name = constraint_name


def integrity_error(message: str, constraint_name: str | None = None) -> IntegrityError:
    orig = Exception(message)
    orig.__cause__ = DriverError(message, constraint_name)
    return IntegrityError("INSERT", {}, orig)


class TestConstraintOf:
    """Tests for constraint_of."""

    def test_uses_constraint_name(self):
        error = integrity_error("duplicate key", "uq_posts_slug")

        assert constraint_of(error) == Constraint.POST_SLUG

    def test_falls_back_to_message(self):
        error = integrity_error(
            'insert or update on table "posts" violates foreign key constraint '
            '"fk_posts_category_id"'
        )

        assert constraint_of(error) == Constraint.POST_CATEGORY

    def test_unknown(self):
        error = integrity_error("something else", "pk_other")

        assert constraint_of(error) == Constraint.UNKNOWN


class TestTranslate:
    """Tests for translate."""

    def test_integrity_error(self):
        result = translate(integrity_error("dup", "uq_categories_name"))

        assert isinstance(result, ConstraintViolationError)
        assert result.constraint == Constraint.CATEGORY_NAME

    def test_other_errors_are_storage_errors(self):
        result = translate(OperationalError("SELECT", {}, Exception("gone")))

        assert isinstance(result, StorageError)
        assert str(result) == "Storage failure"
