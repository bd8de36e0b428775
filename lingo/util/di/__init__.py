"""Dependency injection wiring.

Scopes: settings, the engine and the retry policy live for the whole
process (APP); sessions, repositories, services and use cases are built
per request (REQUEST), so each request sees one transaction.
"""

from typing import Type

from lingo.util.di.application import ProdApplicationProvider
from lingo.util.di.base import Component, ProviderBase
from lingo.util.di.core import ProdConfigProvider
from lingo.util.di.domain import ProdDomainProvider
from lingo.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable: Postgres in production, in-memory in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the provider class to instantiate.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the in-memory implementation of a swappable component

    Returns:
        base itself when it has no subclasses, otherwise the subclass whose
        __is_mock__ equals use_mock

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
