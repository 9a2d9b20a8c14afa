"""Pagination value objects shared by list operations."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from blog.domain.value.common import ValueObject

T = TypeVar("T")


class PageRequest(ValueObject):
    """1-based page request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        """Number of items to skip."""
        return (self.page - 1) * self.limit


class Page(BaseModel, Generic[T]):
    """One page of results plus totals.

    A page past the end has no items but still reports the real totals.
    """

    items: list[T]
    total: int = Field(ge=0)
    current_page: int = Field(ge=1)
    total_pages: int = Field(ge=0)

    @classmethod
    def build(cls, items: list[T], total: int, request: PageRequest) -> "Page[T]":
        """Build a page from a slice of results.

        Args:
            items: Items on this page
            total: Total number of matching items
            request: The request that produced the slice

        Returns:
            Page with computed total_pages
        """
        return cls(
            items=items,
            total=total,
            current_page=request.page,
            total_pages=math.ceil(total / request.limit),
        )
