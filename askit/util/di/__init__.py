"""Dependency injection wiring.

Every provider base in ``PROVIDERS`` is either concrete (config, domain
services, use cases) or a mockable component such as persistence, whose
production and in-memory implementations are subclasses told apart by
``__is_mock__``. Tests pick the in-memory side unless a component is unmocked.
"""

from typing import Type

from askit.util.di.application import ProdApplicationProvider
from askit.util.di.base import Component, ProviderBase
from askit.util.di.core import ProdConfigProvider
from askit.util.di.domain import ProdDomainProvider
from askit.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from askit.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the in-memory implementation of a mockable component

    Returns:
        ``base`` itself when it has no implementations, otherwise the
        matching subclass

    Raises:
        DependencyInjectionError: If a mockable component lacks the requested side
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "in-memory" if use_mock else "production"
    component = getattr(base, "__mock_component__", base.__name__)
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "DependencyInjectionError",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
