"""Response envelopes shared by all routes."""

from typing import Generic, TypeVar

from blog.application.usecase.common import CamelModel

T = TypeVar("T")


class Envelope(CamelModel, Generic[T]):
    """``{"success": true, "data": ...}``"""

    success: bool = True
    data: T


class ListEnvelope(CamelModel, Generic[T]):
    """Envelope for a list with its length."""

    success: bool = True
    count: int
    data: list[T]


class PageEnvelope(CamelModel, Generic[T]):
    """Envelope for one page of a paginated list.

    Serialized as ``currentPage`` and ``totalPages``.
    """

    success: bool = True
    count: int
    total: int
    current_page: int
    total_pages: int
    data: list[T]
