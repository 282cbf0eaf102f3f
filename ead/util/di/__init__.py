"""Dependency injection module.

Every provider base is listed in ``PROVIDERS``. A base with subclasses is a
mockable component: the production subclass lives next to it under
``infrastructure``, the mock one under ``tests/di``.
"""

from typing import Type

from ead.util.di.application import ProdApplicationProvider
from ead.util.di.base import Component, ProviderBase
from ead.util.di.core import ProdConfigProvider
from ead.util.di.domain import ProdDomainProvider
from ead.util.di.infrastructure import (
    EadApiProvider,
    PersistenceProvider,
    ProdEadApiProvider,
    ProdPersistenceProvider,
)
from ead.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EadApiProvider,
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether a provider base has interchangeable implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a base.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the test implementation of a mockable component

    Returns:
        ``base`` itself when it is not mockable, else the matching subclass

    Raises:
        DependencyInjectionError: If the component has no such implementation
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl
    raise DependencyInjectionError(
        base.__mock_component__ or base.__name__, use_mock
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "EadApiProvider",
    "PersistenceProvider",
    "ProdEadApiProvider",
    "ProdPersistenceProvider",
]
