"""Unit tests for the HTTP error mapping."""

import pytest

from blog.domain.error import (
    Constraint,
    ConstraintViolationError,
    DuplicateNameError,
    ForbiddenError,
    HasDependentsError,
    InvalidCategoryError,
    NotFoundError,
    StorageError,
    ValidationFailedError,
)
from blog.interface.error import error_response, status_for


@pytest.mark.parametrize(
    "error, expected",
    [
        (NotFoundError("Post", "x"), 404),
        (ForbiddenError("Post", "x", "u"), 403),
        (DuplicateNameError("Category", "Travel"), 400),
        (HasDependentsError(3), 400),
        (ValidationFailedError("title: required"), 400),
        (InvalidCategoryError("x"), 400),
        (StorageError(), 500),
        (ConstraintViolationError(Constraint.UNKNOWN), 500),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_error_response_envelope():
    response = error_response(404, "Post not found: x")

    assert response.status_code == 404
    assert response.body == b'{"success":false,"error":"Post not found: x"}'
