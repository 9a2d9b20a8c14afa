"""Domain layer errors."""

from enum import Enum


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationFailedError(DomainError):
    """A field failed a length, format or required check."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateNameError(DomainError):
    """Raised when a name (or the slug derived from it) is already taken."""

    def __init__(self, resource: str, value: str):
        self.resource = resource
        self.value = value
        super().__init__(f"{resource} with this name already exists: {value}")


class HasDependentsError(DomainError):
    """Raised when deleting a category that posts still reference."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Cannot delete category. It has {count} post(s) associated with it."
        )


class ForbiddenError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class InvalidCategoryError(DomainError):
    """Raised when a post references a category that does not exist."""

    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Invalid category: {category_id}")


class Constraint(str, Enum):
    """Store constraints that repositories report by name."""

    CATEGORY_NAME = "category_name"
    CATEGORY_SLUG = "category_slug"
    POST_SLUG = "post_slug"
    POST_CATEGORY = "post_category"
    COMMENT_POST = "comment_post"
    UNKNOWN = "unknown"


class ConstraintViolationError(DomainError):
    """Raised by repositories when a store constraint rejects a write.

    Services translate this into one of the errors above.
    """

    def __init__(self, constraint: Constraint):
        self.constraint = constraint
        super().__init__(f"Constraint violated: {constraint.value}")


class StorageError(DomainError):
    """Unexpected store failure. Never retried by the services."""

    def __init__(self, message: str = "Storage failure"):
        super().__init__(message)
