"""Base service class for domain services."""

from pydantic import ValidationError

from blog.domain.error import ValidationFailedError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def validation_failed(error: ValidationError) -> ValidationFailedError:
        """Turn a pydantic validation error into a domain error.

        Args:
            error: Error raised while building a domain model

        Returns:
            ValidationFailedError listing each failing field
        """
        messages = []
        for item in error.errors():
            field = ".".join(str(part) for part in item["loc"]) or "value"
            messages.append(f"{field}: {item['msg']}")
        return ValidationFailedError("; ".join(messages))
