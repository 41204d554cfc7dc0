"""Dependency injection module."""

from typing import Type

from jolt.util.di.application import ProdApplicationProvider
from jolt.util.di.base import Component, ProviderBase
from jolt.util.di.core import ProdConfigProvider
from jolt.util.di.domain import ProdDomainProvider
from jolt.util.di.infrastructure import (
    IdentityProviderProvider,
    PersistenceProvider,
    ProdIdentityProviderProvider,
    ProdPersistenceProvider,
)

# Order is irrelevant to dishka; grouped for reading
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    IdentityProviderProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have alternative implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation class of a provider entry.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Select the implementation flagged ``__is_mock__``

    Returns:
        Provider class (not instantiated); ``base`` itself when it has no
        implementations

    Raises:
        ValueError: If no implementation of the requested kind is loaded.
            Mock implementations live in tests/di and must be imported first.
    """
    implementations = {
        impl.__is_mock__: impl for impl in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
        ) from None


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "IdentityProviderProvider",
    "PersistenceProvider",
    "ProdIdentityProviderProvider",
    "ProdPersistenceProvider",
]
