"""Translation of database errors into domain errors."""

from sqlalchemy.exc import DBAPIError, IntegrityError

from blog.domain.error import Constraint, ConstraintViolationError, StorageError

CONSTRAINTS = {
    "uq_categories_name": Constraint.CATEGORY_NAME,
    "uq_categories_slug": Constraint.CATEGORY_SLUG,
    "uq_posts_slug": Constraint.POST_SLUG,
    "fk_posts_category_id": Constraint.POST_CATEGORY,
    "fk_comments_post_id": Constraint.COMMENT_POST,
}


def constraint_of(error: IntegrityError) -> Constraint:
    """Name the constraint that rejected a write.

    asyncpg exposes ``constraint_name`` on the driver exception; the message
    text is used when it is missing.
    """
    driver_error = getattr(error.orig, "__cause__", None)
    name = getattr(driver_error, "constraint_name", None)
    if name in CONSTRAINTS:
        return CONSTRAINTS[name]

    message = str(error.orig)
    for constraint_name, constraint in CONSTRAINTS.items():
        if constraint_name in message:
            return constraint
    return Constraint.UNKNOWN


def translate(error: DBAPIError) -> ConstraintViolationError | StorageError:
    """Map a driver error to the matching domain error."""
    if isinstance(error, IntegrityError):
        return ConstraintViolationError(constraint_of(error))
    return StorageError()
