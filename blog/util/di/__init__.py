"""Dependency injection for the blog API.

``PROVIDERS`` lists provider bases in registration order. A base with
subclasses is a mockable component: production code picks the subclass with
``__is_mock__ = False``, the test container the one with ``__is_mock__ = True``.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from blog.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable: PostgreSQL or in-memory store
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself when it has no subclasses, else the matching subclass

    Raises:
        DependencyInjectionError: If no subclass matches ``use_mock``
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    component = base.__mock_component__ or base.__name__
    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(f"No {kind} provider registered for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
